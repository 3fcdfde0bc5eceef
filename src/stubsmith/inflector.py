"""Linguistic helpers used to derive conventional names."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

import inflection

__all__ = ["Inflector", "InflectionInflector"]


_WORD_SEPARATORS = re.compile(r"[\s\-_]+")
_WORD_START = re.compile(r"(^|\s)(\S)")


class Inflector(ABC):
    """Pluralization and case conversion used by :class:`~stubsmith.naming.NameResolver`."""

    @abstractmethod
    def pluralize(self, word: str) -> str:
        """Return the plural form of ``word``."""

    @abstractmethod
    def singularize(self, word: str) -> str:
        """Return the singular form of ``word``."""

    @abstractmethod
    def to_camel_case(self, value: str) -> str:
        """Return ``value`` as ``camelCase`` with the first letter lowercased."""

    @abstractmethod
    def to_snake_case(self, value: str) -> str:
        """Return ``value`` as ``snake_case``."""

    @abstractmethod
    def to_title_case(self, value: str) -> str:
        """Upper-case the first letter of every whitespace separated word."""


class InflectionInflector(Inflector):
    """:class:`Inflector` backed by the ``inflection`` package."""

    def pluralize(self, word: str) -> str:
        return inflection.pluralize(word)

    def singularize(self, word: str) -> str:
        return inflection.singularize(word)

    def to_camel_case(self, value: str) -> str:
        text = _WORD_SEPARATORS.sub("_", value).strip("_")
        if not text:
            return ""
        return inflection.camelize(text, uppercase_first_letter=False)

    def to_snake_case(self, value: str) -> str:
        text = _WORD_SEPARATORS.sub("_", value.strip())
        return inflection.underscore(text).strip("_")

    def to_title_case(self, value: str) -> str:
        return _WORD_START.sub(lambda match: match.group(1) + match.group(2).upper(), value)
