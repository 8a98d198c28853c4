"""assetpath — resolve asset paths against a public document root."""

__version__ = "0.1.0"
