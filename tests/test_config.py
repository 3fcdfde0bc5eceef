from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from stubsmith.config import (
    STUBS_DIR,
    GeneratorConfig,
    GeneratorSettings,
    Layout,
    PathFormat,
    find_config,
    load_config,
)
from stubsmith.errors import ConfigurationError


def test_defaults_describe_builtin_generators():
    config = GeneratorConfig()
    assert config.root_namespace == "app"
    assert config.settings_for("controller").postfix == "Controller"
    assert config.settings_for("seed").postfix == "Seeder"
    assert config.settings_for("view").layout is Layout.VIEW
    assert config.namespace_for("model") == ".models"


def test_unknown_type_uses_empty_settings():
    config = GeneratorConfig()
    assert config.settings_for("repository") == GeneratorSettings()
    assert config.namespace_for("repository") == ""


def test_builtin_stubs_exist():
    config = GeneratorConfig()
    assert config.stub_path("model_stub") == STUBS_DIR / "model.stub"
    for key, path in config.stubs.items():
        assert path.is_file(), f"stub for {key} is missing"
    assert config.stub_path("view_plain_stub") is None


def test_settings_are_immutable():
    settings = GeneratorSettings()
    with pytest.raises(ValidationError):
        settings.postfix = "Controller"


def test_load_config_without_path_returns_defaults():
    assert load_config(None) == GeneratorConfig()


def test_load_config_merges_over_defaults(tmp_path: Path):
    config_path = tmp_path / "stubsmith.toml"
    config_path.write_text(
        "\n".join(
            [
                'root_namespace = "blog"',
                "",
                "[stubs]",
                'custom_stub = "stubs/custom.stub"',
                "",
                "[namespaces]",
                'model = ".domain"',
                "",
                "[settings.controller]",
                'path_format = "preserve"',
                "",
                "[settings.repository]",
                'postfix = "Repository"',
            ]
        ),
        encoding="utf-8",
    )

    config = load_config(config_path)

    assert config.root_namespace == "blog"
    assert config.stub_path("custom_stub") == tmp_path.resolve() / "stubs" / "custom.stub"
    assert config.stub_path("model_stub") == STUBS_DIR / "model.stub"
    assert config.namespace_for("model") == ".domain"
    assert config.namespace_for("controller") == ".controllers"

    controller = config.settings_for("controller")
    assert controller.path_format is PathFormat.PRESERVE_CASE
    assert controller.postfix == "Controller"
    assert controller.directory == "controllers"
    assert config.settings_for("repository").postfix == "Repository"


def test_load_config_missing_file(tmp_path: Path):
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "absent.toml")


def test_load_config_rejects_invalid_toml(tmp_path: Path):
    config_path = tmp_path / "stubsmith.toml"
    config_path.write_text("[stubs\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(config_path)


@pytest.mark.parametrize(
    "content",
    [
        'unknown = "value"',
        '[settings.model]\npath_format = "shouting"',
        '[settings.model]\nsuffix = ".php"',
        '[settings]\nmodel = "lowercase"',
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, content: str):
    config_path = tmp_path / "stubsmith.toml"
    config_path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(config_path)


def test_find_config(tmp_path: Path):
    assert find_config(tmp_path) is None
    (tmp_path / "stubsmith.toml").write_text("", encoding="utf-8")
    assert find_config(tmp_path) == tmp_path / "stubsmith.toml"
