"""Generator command tying the name resolver, stub registry and writer together."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from .config import GeneratorConfig, Layout
from .errors import ConfigurationError
from .inflector import InflectionInflector, Inflector
from .naming import SEPARATOR, NameResolver, ResolvedNames
from .scaffold import FileGenerator
from .template import MissingPolicy, TemplateRenderer

__all__ = ["GeneratorCommand", "GeneratorOptions", "stub_key"]


LOGGER = logging.getLogger(__name__)


class GeneratorOptions(BaseModel):
    """Flags of a single generate invocation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: str = Field(..., description="Generator type, e.g. 'model' or 'controller'.")
    stub: str | None = Field(None, description="Explicit stub identifier overriding the type.")
    plain: bool = Field(False, description="Request the bare variant of the stub.")
    force: bool = Field(False, description="Overwrite the output file if it exists.")
    missing: MissingPolicy = Field(
        MissingPolicy.KEEP, description="What unresolved stub placeholders turn into."
    )


def stub_key(options: GeneratorOptions) -> str:
    """Return the registry key of the stub requested by ``options``."""

    plain = "_plain" if options.plain else ""
    if options.stub is None:
        return f"{options.type}{plain}_stub"
    return f"{options.stub}{plain}_stub"


class GeneratorCommand:
    """Generate one file from a stub for a resource name.

    The command owns no naming logic itself. It builds a :class:`NameResolver`
    from the settings of the requested generator type, looks the stub up in
    the configuration and hands the rendered result to a
    :class:`~stubsmith.scaffold.FileGenerator`.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        writer: FileGenerator | None = None,
        inflector: Inflector | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.inflector = inflector or InflectionInflector()
        self.writer = writer or FileGenerator(TemplateRenderer(self.inflector))

    def resolver_for(self, generator_type: str) -> NameResolver:
        return NameResolver(
            self.config.settings_for(generator_type),
            self.inflector,
            default_resource=self.config.default_resource,
        )

    def resolve(self, generator_type: str, name: str) -> ResolvedNames:
        return self.resolver_for(generator_type).resolve(name)

    def get_stub(self, options: GeneratorOptions) -> Path:
        """Return the stub template for ``options``.

        Raises :class:`ConfigurationError` when the key is not registered or
        the registered file does not exist.
        """

        key = stub_key(options)
        stub = self.config.stub_path(key)
        if stub is None:
            LOGGER.error("stub '%s' is not configured", key)
            raise ConfigurationError(f'The stub does not exist in the config file - "{key}"', key=key)
        if not stub.is_file():
            raise ConfigurationError(f'The stub file for "{key}" was not found: {stub}', key=key)

        LOGGER.debug("using stub %s for key %s", stub, key)
        return stub

    def default_namespace(self, generator_type: str, root_namespace: str | None = None) -> str:
        """Return ``root_namespace`` followed by the namespace configured for the type."""

        if root_namespace is None:
            root_namespace = self.config.root_namespace
        return root_namespace + self.config.namespace_for(generator_type)

    def namespace(self, generator_type: str, names: ResolvedNames) -> str:
        parts = [self.default_namespace(generator_type).strip(".")]
        parts.extend(segment for segment in names.path.split(SEPARATOR) if segment)
        return ".".join(part for part in parts if part)

    def target_path(self, generator_type: str, names: ResolvedNames, directory: str | Path) -> Path:
        """Return where the file generated for ``names`` is written."""

        settings = self.config.settings_for(generator_type)
        resolver = self.resolver_for(generator_type)
        root = Path(directory) / settings.directory

        if settings.layout is Layout.MIGRATION:
            stem = resolver.file_name_complete(f"create_{names.table_name}_table")
            return root / f"{stem}{settings.extension}"

        if settings.layout is Layout.VIEW:
            stem = resolver.file_name_complete(names.name_only)
        else:
            stem = self.inflector.to_snake_case(names.file_name_complete)

        return root / names.path / f"{stem}{settings.extension}"

    def context(self, generator_type: str, names: ResolvedNames) -> Dict[str, Any]:
        context: Dict[str, Any] = dict(names.context())
        context["type"] = generator_type
        context["namespace"] = self.namespace(generator_type, names)
        context["class_name"] = names.file_name_complete
        return context

    def run(self, name: str, options: GeneratorOptions, directory: str | Path = ".") -> Path:
        """Generate the file for ``name`` and return its path."""

        names = self.resolve(options.type, name)
        LOGGER.debug("resolved %r as %s", name, names.model_dump())

        stub = self.get_stub(options)
        if not names.name_only:
            raise ValueError("cannot generate a file from an empty name")

        destination = self.target_path(options.type, names, directory)
        return self.writer.generate(
            stub,
            destination,
            self.context(options.type, names),
            force=options.force,
            missing=options.missing,
        )
