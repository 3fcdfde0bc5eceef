"""Configuration models shared by the generator command and CLI."""

from __future__ import annotations

import tomllib
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError

__all__ = [
    "CONFIG_FILENAME",
    "STUBS_DIR",
    "GeneratorConfig",
    "GeneratorSettings",
    "Layout",
    "PathFormat",
    "find_config",
    "load_config",
]


CONFIG_FILENAME = "stubsmith.toml"
STUBS_DIR = Path(__file__).resolve().parent / "stubs"


class PathFormat(str, Enum):
    """Casing applied to the directory segments of a generated file."""

    PRESERVE_CASE = "preserve"
    LOWERCASE = "lowercase"


class Layout(str, Enum):
    """Which derived name becomes the file name of a generated file."""

    CLASS = "class"
    VIEW = "view"
    MIGRATION = "migration"


class GeneratorSettings(BaseModel):
    """Naming settings for one generator type.

    Only ``prefix``, ``postfix`` and ``path_format`` influence the derived
    names. The remaining fields tell the generator command where the rendered
    stub is written.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    prefix: str = Field("", description="Text prepended to generated class names.")
    postfix: str = Field("", description="Text appended to generated class names.")
    path_format: PathFormat = Field(
        PathFormat.PRESERVE_CASE, description="Casing policy for namespace directories."
    )
    directory: str = Field("", description="Output directory relative to the target root.")
    extension: str = Field(".py", description="File extension of generated files.")
    layout: Layout = Field(Layout.CLASS, description="Naming rule for the generated file.")


def _builtin_settings() -> Dict[str, GeneratorSettings]:
    lowercase = PathFormat.LOWERCASE
    return {
        "model": GeneratorSettings(path_format=lowercase, directory="models"),
        "controller": GeneratorSettings(
            postfix="Controller", path_format=lowercase, directory="controllers"
        ),
        "seed": GeneratorSettings(postfix="Seeder", path_format=lowercase, directory="seeds"),
        "view": GeneratorSettings(
            path_format=lowercase, directory="templates", extension=".html", layout=Layout.VIEW
        ),
        "migration": GeneratorSettings(
            path_format=lowercase, directory="migrations", layout=Layout.MIGRATION
        ),
    }


def _builtin_stubs() -> Dict[str, Path]:
    names = [
        "model",
        "model_plain",
        "controller",
        "controller_plain",
        "seed",
        "seed_plain",
        "view",
        "migration",
        "migration_plain",
    ]
    return {f"{name}_stub": STUBS_DIR / f"{name}.stub" for name in names}


def _builtin_namespaces() -> Dict[str, str]:
    return {
        "model": ".models",
        "controller": ".controllers",
        "seed": ".seeds",
        "view": "",
        "migration": ".migrations",
    }


class GeneratorConfig(BaseModel):
    """Stub registry, namespaces and per-type settings for a project."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    root_namespace: str = Field("app", description="Namespace every generated module lives under.")
    default_resource: str = Field(
        "", description="Resource used when a name derivation is requested without a name."
    )
    stubs: Dict[str, Path] = Field(
        default_factory=_builtin_stubs, description="Stub key to template location."
    )
    namespaces: Dict[str, str] = Field(
        default_factory=_builtin_namespaces, description="Generator type to namespace suffix."
    )
    settings: Dict[str, GeneratorSettings] = Field(
        default_factory=_builtin_settings, description="Generator type to naming settings."
    )

    def settings_for(self, generator_type: str) -> GeneratorSettings:
        """Return the settings of ``generator_type`` or empty settings when unknown."""

        return self.settings.get(generator_type.lower(), GeneratorSettings())

    def stub_path(self, key: str) -> Path | None:
        """Return the template registered under ``key``, if any."""

        return self.stubs.get(key)

    def namespace_for(self, generator_type: str) -> str:
        return self.namespaces.get(generator_type.lower(), "")

    def merged(self, overrides: Mapping[str, Any], *, base_dir: Path | None = None) -> "GeneratorConfig":
        """Return a new config with ``overrides`` layered over this one.

        Relative stub paths in ``overrides`` are resolved against ``base_dir``.
        Settings are merged field by field so an override may change a single
        attribute of a built-in generator type.
        """

        data = dict(overrides)

        stubs: Dict[str, Any] = dict(self.stubs)
        for key, location in dict(data.pop("stubs", {}) or {}).items():
            stub = Path(str(location)).expanduser()
            if base_dir is not None and not stub.is_absolute():
                stub = base_dir / stub
            stubs[key] = stub

        namespaces = {**self.namespaces, **dict(data.pop("namespaces", {}) or {})}

        settings: Dict[str, Any] = {key: value.model_dump() for key, value in self.settings.items()}
        for generator_type, values in dict(data.pop("settings", {}) or {}).items():
            if not isinstance(values, Mapping):
                raise ConfigurationError(f"settings for '{generator_type}' must be a table")
            settings[generator_type] = {**settings.get(generator_type, {}), **values}

        payload = {
            "root_namespace": self.root_namespace,
            "default_resource": self.default_resource,
            **data,
            "stubs": stubs,
            "namespaces": namespaces,
            "settings": settings,
        }
        try:
            return GeneratorConfig.model_validate(payload)
        except ValidationError as exc:
            raise ConfigurationError(f"invalid configuration: {exc}") from exc


def find_config(directory: str | Path) -> Path | None:
    """Return the ``stubsmith.toml`` inside ``directory`` if it exists."""

    candidate = Path(directory) / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def load_config(path: str | Path | None = None) -> GeneratorConfig:
    """Load ``path`` on top of the built-in defaults.

    When ``path`` is ``None`` the built-in configuration is returned unchanged.
    """

    config = GeneratorConfig()
    if path is None:
        return config

    config_path = Path(path).expanduser()
    if not config_path.is_file():
        raise ConfigurationError(f"configuration file not found: {config_path}")

    try:
        with config_path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"cannot parse {config_path}: {exc}") from exc

    return config.merged(data, base_dir=config_path.resolve().parent)
