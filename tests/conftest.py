import posixpath

import pytest
from click.testing import CliRunner

from assetpath.core import env
from assetpath.services.factory import AssetFactory

PUBLIC = "/var/www/public"


class MemoryFilesystem:
    """In-memory stand-in for the real disk."""

    def __init__(self, files=(), links=None):
        self.files = set()
        self.dirs = {"/"}
        self.links = dict(links or {})
        for f in files:
            self.add(f)

    def add(self, path):
        self.files.add(path)
        parent = posixpath.dirname(path)
        while parent not in self.dirs:
            self.dirs.add(parent)
            parent = posixpath.dirname(parent)

    def exists(self, path):
        return path in self.files or path in self.dirs

    def canonicalize(self, path):
        real = posixpath.normpath(path) if path.startswith("/") and not path.startswith("//") else path
        for link, target in self.links.items():
            if real == link or real.startswith(link + "/"):
                real = target + real[len(link):]
        if not self.exists(real):
            raise FileNotFoundError(path)
        return real


@pytest.fixture
def runner():
    """Click CLI runner fixture."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host ASSETPATH_* variables out of the tests."""
    monkeypatch.delenv(env.PUBLIC_ROOT_VAR, raising=False)
    monkeypatch.delenv(env.ENVIRONMENT_VAR, raising=False)


@pytest.fixture
def memory_fs():
    return MemoryFilesystem([PUBLIC + "/css/app.css", PUBLIC + "/dist/app.js"])


@pytest.fixture
def factory(memory_fs):
    return AssetFactory(memory_fs, "testing", PUBLIC)
