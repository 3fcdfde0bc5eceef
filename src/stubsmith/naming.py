"""Naming conventions used to turn a resource name into generated file names.

Every derivation here is a pure string transform. Identifiers may use ``/``,
``\\`` or ``.`` as hierarchy separators; they are normalized to ``/`` before
anything else happens. Empty or separator-only input degrades to empty
results instead of raising.
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from .config import GeneratorSettings, PathFormat
from .inflector import InflectionInflector, Inflector

__all__ = ["NameResolver", "ResolvedNames", "normalize_separators"]


SEPARATOR = "/"


def normalize_separators(raw: str) -> str:
    """Replace every ``\\`` and ``.`` in ``raw`` with ``/``."""

    return raw.replace("\\", SEPARATOR).replace(".", SEPARATOR)


def _basename(name: str) -> str:
    return normalize_separators(name).rsplit(SEPARATOR, 1)[-1]


def _upper_first(segment: str) -> str:
    return segment[:1].upper() + segment[1:]


class ResolvedNames(BaseModel):
    """Every name derived from a single raw identifier."""

    model_config = ConfigDict(extra="forbid", frozen=True, protected_namespaces=())

    argument_name: str = Field(..., description="Raw identifier with the postfix removed.")
    name_only: str = Field(..., description="Leaf segment of the identifier.")
    path: str = Field(..., description="Containing directory, with a trailing separator.")
    resource_name: str = Field(..., description="Singular lowercase resource identifier.")
    model_name: str = Field(..., description="Model class name.")
    controller_name: str = Field(..., description="Controller class name without postfix.")
    seed_name: str = Field(..., description="Seed class name without postfix.")
    collection_name: str = Field(..., description="Plural lowercase resource identifier.")
    view_path: str = Field(..., description="Dotted view lookup path.")
    table_name: str = Field(..., description="Plural snake_case table name.")
    file_name_complete: str = Field(..., description="Class name wrapped in prefix and postfix.")

    def context(self) -> Dict[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return self.model_dump()


class NameResolver:
    """Derive conventional names from a raw identifier and naming settings."""

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        inflector: Inflector | None = None,
        *,
        default_resource: str = "",
    ) -> None:
        self.settings = settings or GeneratorSettings()
        self.inflector = inflector or InflectionInflector()
        self.default_resource = default_resource

    def __repr__(self) -> str:
        return f"{type(self).__name__}(settings={self.settings!r})"

    def _strip_postfix(self, value: str) -> str:
        # Removes every occurrence, not only a trailing one.
        postfix = self.settings.postfix
        if not postfix:
            return value
        return value.replace(postfix, "")

    def argument_name(self, raw: str) -> str:
        """Return ``raw`` with the configured postfix removed."""

        return self._strip_postfix(raw)

    def name_only(self, argument_name: str) -> str:
        """Return only the leaf of ``argument_name``, ignoring its namespace."""

        return _basename(argument_name)

    def path(self, argument_name: str, with_name: bool = False) -> str:
        """Return the directory of ``argument_name``.

        Segments get an upper-case first letter, or are lowercased entirely
        when the settings ask for :attr:`PathFormat.LOWERCASE`. With
        ``with_name`` the leaf is kept and a trailing separator appended;
        otherwise everything up to and including the last separator is
        returned, which is ``""`` for identifiers without a namespace.
        """

        segments = normalize_separators(argument_name).split(SEPARATOR)
        if self.settings.path_format is PathFormat.LOWERCASE:
            segments = [segment.lower() for segment in segments]
        else:
            segments = [_upper_first(segment) for segment in segments]
        name = SEPARATOR.join(segments)

        if with_name:
            return name + SEPARATOR

        if SEPARATOR in name:
            return name[: name.rindex(SEPARATOR) + 1]
        return ""

    def resource_name(self, name: str | None = None, format: bool = True) -> str:
        """Return the singular, lowercase resource identifier for ``name``.

        With ``format=False`` a non-empty ``name`` is assumed to be a resource
        name already and is returned untouched.
        """

        if name and format is False:
            return name

        if name is None:
            name = self.default_resource

        return self.inflector.singularize(_basename(name).lower())

    def model_name(self, name: str | None = None) -> str:
        resource = self.resource_name(name)
        return self.inflector.to_title_case(self.inflector.to_camel_case(resource))

    def controller_name(self, name: str | None = None, format: bool = True) -> str:
        resource = self._strip_postfix(self.resource_name(name, format))
        return self.inflector.to_title_case(self.inflector.to_camel_case(resource))

    def seed_name(self, name: str | None = None) -> str:
        return self.controller_name(name)

    def collection_name(self, name: str | None = None) -> str:
        return self.inflector.pluralize(self.resource_name(name)).lower()

    def view_path(self, name: str) -> str:
        """Return the dotted view path for ``name``.

        Every segment is pluralized on its own, so ``"admin/post"`` becomes
        ``"admins.posts"``.
        """

        segments = [self.inflector.pluralize(segment) for segment in name.split(SEPARATOR)]
        return ".".join(segments).strip(".").lower()

    def table_name(self, name: str) -> str:
        snake = self.inflector.to_snake_case(_basename(name))
        return self.inflector.pluralize(snake).lower()

    def file_name_complete(self, name: str) -> str:
        return f"{self.settings.prefix}{name}{self.settings.postfix}"

    def resolve(self, raw: str) -> ResolvedNames:
        """Derive every name for ``raw`` in one pass."""

        argument = self.argument_name(raw)
        normalized = normalize_separators(argument)
        controller = self.controller_name(argument)

        return ResolvedNames(
            argument_name=argument,
            name_only=self.name_only(argument),
            path=self.path(argument),
            resource_name=self.resource_name(argument),
            model_name=self.model_name(argument),
            controller_name=controller,
            seed_name=self.seed_name(argument),
            collection_name=self.collection_name(argument),
            view_path=self.view_path(normalized),
            table_name=self.table_name(argument),
            file_name_complete=self.file_name_complete(controller),
        )
