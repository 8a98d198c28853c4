import hashlib

import pytest

from assetpath.core.errors import ConfigError
from assetpath.core.filesystem import LocalFilesystem
from assetpath.core.models import AssetSettings
from assetpath.services.factory import AssetFactory

from conftest import PUBLIC, MemoryFilesystem


def test_asset_under_public_root(factory):
    assert factory.resolve(PUBLIC + "/css/app.css") == (PUBLIC + "/css/app.css", "css/app.css", 1)


def test_vendor_asset_uses_published_copy(factory):
    absolute, relative, _ = factory.resolve("/vendor/pkg/dist/app.js")
    assert absolute == PUBLIC + "/dist/app.js"
    assert relative == "dist/app.js"


def test_protocol_relative_asset(factory):
    absolute, relative, _ = factory.resolve("//cdn.example.com/lib.js")
    assert absolute == "//cdn.example.com/lib.js"
    assert relative == "//cdn.example.com/lib.js"


def test_unrelated_asset_gets_hashed_identifier(factory):
    absolute, relative, _ = factory.resolve("/completely/unrelated/file.css")
    assert absolute == "/completely/unrelated/file.css"
    assert relative == hashlib.md5(b"/completely/unrelated").hexdigest() + "/file.css"


def test_none_path(factory):
    assert factory.resolve(None) == (None, None, 1)


def test_re_resolving_is_idempotent(factory):
    absolute, relative, _ = factory.resolve(PUBLIC + "/css/../css/app.css")
    again, relative_again, _ = factory.resolve(absolute)
    assert (again, relative_again) == (absolute, relative)


def test_orders_follow_call_sequence(factory):
    paths = [PUBLIC + "/css/app.css", "/vendor/dist/app.js", None, "//cdn.example.com/x.js", "/nowhere/y.css"]
    assert [factory.make(p).order for p in paths] == [1, 2, 3, 4, 5]


def test_make_builds_asset(factory):
    asset = factory.make(PUBLIC + "/css/app.css")
    assert asset.relative_path == "css/app.css"
    assert asset.environment == "testing"
    assert asset.extension == "css"
    assert asset.group == "stylesheets"
    assert not asset.is_remote

    remote = factory.make("https://cdn.example.com/app.js?v=1")
    assert remote.is_remote
    assert remote.group == "javascripts"


def test_trailing_slash_on_public_root_is_dropped(memory_fs):
    factory = AssetFactory(memory_fs, "testing", PUBLIC + "/")
    assert factory.public_root == PUBLIC
    assert factory.resolve(PUBLIC + "/css/app.css")[1] == "css/app.css"


@pytest.mark.parametrize("root", ["", "   ", "relative/public", "/does/not/exist"])
def test_bad_public_root_fails_at_construction(root):
    with pytest.raises(ConfigError):
        AssetFactory(MemoryFilesystem(), "testing", root)


def test_local_filesystem(tmp_path):
    public = tmp_path / "public"
    (public / "dist").mkdir(parents=True)
    (public / "dist" / "app.js").write_text("")
    vendor = tmp_path / "vendor" / "pkg" / "dist"
    vendor.mkdir(parents=True)

    factory = AssetFactory.from_settings(AssetSettings(public_root=str(public), environment="local"))
    asset = factory.make(str(vendor / "app.js"))
    assert asset.absolute_path == str(public / "dist" / "app.js")
    assert asset.relative_path == "dist/app.js"
    assert asset.order == 1

    with pytest.raises(OSError):
        LocalFilesystem().canonicalize(str(tmp_path / "missing.css"))


@pytest.mark.parametrize("path", ["/", ""])
def test_degenerate_paths_get_slash_free_identifier(memory_fs, path):
    factory = AssetFactory(memory_fs, "testing", PUBLIC)
    _, relative, _ = factory.resolve(path)
    assert relative
    assert not relative.startswith("/")
    assert not relative.endswith("/")


def test_windows_public_root_is_absolute():
    fs = MemoryFilesystem()
    fs.canonicalize = lambda path: path
    factory = AssetFactory(fs, "testing", "C:\\www\\public\\")
    assert factory.public_root == "C:\\www\\public"
