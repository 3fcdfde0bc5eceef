"""Placeholder substitution for stub files.

Stubs contain ``{{ key|filter|filter }}`` expressions. Keys are looked up in
the context mapping (dotted keys walk nested mappings or attributes) and the
value is passed through each filter from left to right. Everything outside
the double braces, including ``{% ... %}`` blocks meant for another template
engine, is copied verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Mapping

from .inflector import InflectionInflector, Inflector

__all__ = [
    "MissingPolicy",
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")

Filter = Callable[[str], str]


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a placeholder."""


class MissingPolicy(str, Enum):
    """What happens to a placeholder whose key is not in the context."""

    KEEP = "keep"
    EMPTY = "empty"
    ERROR = "error"


def _lookup(context: Mapping[str, Any], key: str) -> Any:
    value: Any = context
    for segment in key.split("."):
        if isinstance(value, Mapping) and segment in value:
            value = value[segment]
        elif not isinstance(value, Mapping) and hasattr(value, segment):
            value = getattr(value, segment)
        else:
            raise KeyError(key)
    return value


def _default_filters(inflector: Inflector) -> Dict[str, Filter]:
    def studly(value: str) -> str:
        return inflector.to_title_case(inflector.to_camel_case(value))

    return {
        "upper": str.upper,
        "lower": str.lower,
        "strip": str.strip,
        "repr": repr,
        "plural": inflector.pluralize,
        "singular": inflector.singularize,
        "snake": inflector.to_snake_case,
        "camel": inflector.to_camel_case,
        "studly": studly,
    }


@dataclass(slots=True)
class TemplateRenderer:
    """Render stubs with the naming filters of an :class:`Inflector`."""

    inflector: Inflector = field(default_factory=InflectionInflector)
    filters: Dict[str, Filter] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.filters = {**_default_filters(self.inflector), **self.filters}

    def _evaluate(self, expression: str, context: Mapping[str, Any], missing: MissingPolicy) -> str | None:
        parts = [part.strip() for part in expression.split("|") if part.strip()]
        if not parts:
            return None

        key, *filter_names = parts
        try:
            value = str(_lookup(context, key))
        except KeyError:
            if missing is MissingPolicy.ERROR:
                raise TemplateRenderingError(f"missing value for '{key}'") from None
            return None if missing is MissingPolicy.KEEP else ""

        for name in filter_names:
            if name not in self.filters:
                raise TemplateRenderingError(f"unknown filter '{name}'")
            value = self.filters[name](value)
        return value

    def render_string(
        self,
        template: str,
        context: Mapping[str, Any],
        *,
        missing: MissingPolicy | str = MissingPolicy.KEEP,
    ) -> str:
        """Render ``template`` using ``context``.

        ``missing`` decides what an unresolved placeholder turns into: it is
        kept as typed, replaced with an empty string, or
        :class:`TemplateRenderingError` is raised.
        """

        policy = MissingPolicy(missing)

        def substitute(match: re.Match[str]) -> str:
            rendered = self._evaluate(match.group("expression"), context, policy)
            return match.group(0) if rendered is None else rendered

        return _PLACEHOLDER_PATTERN.sub(substitute, template)

    def render_file(
        self,
        template_path: str | Path,
        context: Mapping[str, Any],
        *,
        target: str | Path | None = None,
        encoding: str = "utf-8",
        missing: MissingPolicy | str = MissingPolicy.KEEP,
    ) -> str:
        """Render ``template_path`` and optionally write the result to ``target``."""

        template_path = Path(template_path)
        if not template_path.is_file():
            raise FileNotFoundError(template_path)

        rendered = self.render_string(
            template_path.read_text(encoding=encoding), context, missing=missing
        )

        if target is not None:
            target_path = Path(target)
            target_path.parent.mkdir(parents=True, exist_ok=True)
            target_path.write_text(rendered, encoding=encoding)

        return rendered
