"""Derive conventional names from a resource name and generate files from stubs.

The package exposes a pure :class:`NameResolver` for model, controller, seed,
view, table and collection names, a small configuration layer describing the
stub registry, and a generator command that renders a stub into the project
tree. Everything can be used programmatically or via the command line.
"""

from __future__ import annotations

from .config import GeneratorConfig, GeneratorSettings, Layout, PathFormat, load_config
from .errors import ConfigurationError
from .generator import GeneratorCommand, GeneratorOptions, stub_key
from .inflector import InflectionInflector, Inflector
from .naming import NameResolver, ResolvedNames, normalize_separators
from .scaffold import FileGenerator
from .template import MissingPolicy, TemplateRenderer, TemplateRenderingError

__all__ = [
    "ConfigurationError",
    "FileGenerator",
    "GeneratorCommand",
    "GeneratorConfig",
    "GeneratorOptions",
    "GeneratorSettings",
    "InflectionInflector",
    "Inflector",
    "Layout",
    "MissingPolicy",
    "NameResolver",
    "PathFormat",
    "ResolvedNames",
    "TemplateRenderer",
    "TemplateRenderingError",
    "load_config",
    "normalize_separators",
    "stub_key",
]

__version__ = "0.1.0"
