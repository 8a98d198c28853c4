"""Exception hierarchy."""


class AssetpathError(Exception):
    """Base class for all assetpath errors."""


class ConfigError(AssetpathError):
    """Raised when the public root or the config file is unusable."""
