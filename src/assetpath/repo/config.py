"""Repository for assetpath.toml read/write."""

from __future__ import annotations

import os
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

from assetpath.core import env
from assetpath.core.errors import ConfigError
from assetpath.core.models import AssetSettings

DEFAULT_ENVIRONMENT = "production"


def create_default(public_root: str, environment: str = DEFAULT_ENVIRONMENT) -> AssetSettings:
    """Factory for a fresh project config."""
    return AssetSettings(public_root=public_root, environment=environment)


# ── Serialization ───────────────────────────────────────────────────


def dump(settings: AssetSettings) -> str:
    """Serialize AssetSettings to a TOML string."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment("assetpath configuration"))
    doc.add(tomlkit.nl())

    assets = tomlkit.table()
    assets.add("public_root", settings.public_root)
    assets.add("environment", settings.environment)
    doc.add("assets", assets)

    return tomlkit.dumps(doc)


def load(path: Path) -> AssetSettings:
    """Deserialize assetpath.toml into AssetSettings.

    A relative ``public_root`` is taken relative to the file's directory.
    """
    try:
        raw = tomlkit.loads(path.read_text())
    except (OSError, TOMLKitError) as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    assets_raw = raw.get("assets", {})
    public_root = str(assets_raw.get("public_root", "")).strip()
    if not public_root:
        raise ConfigError(f"{path} has no [assets] public_root")
    if not Path(public_root).is_absolute():
        public_root = str(path.parent / public_root)

    return AssetSettings(
        public_root=public_root,
        environment=str(assets_raw.get("environment", DEFAULT_ENVIRONMENT)),
    )


def save(settings: AssetSettings, path: Path) -> None:
    """Write config to disk."""
    path.write_text(dump(settings))


def apply_env_overrides(settings: AssetSettings) -> AssetSettings:
    """Return *settings* with ASSETPATH_PUBLIC_ROOT / ASSETPATH_ENV applied."""
    public_root = os.environ.get(env.PUBLIC_ROOT_VAR, "").strip()
    environment = os.environ.get(env.ENVIRONMENT_VAR, "").strip()
    return AssetSettings(
        public_root=public_root or settings.public_root,
        environment=environment or settings.environment,
    )
