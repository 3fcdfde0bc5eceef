"""Write rendered stubs to disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .template import MissingPolicy, TemplateRenderer

__all__ = ["FileGenerator"]


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class FileGenerator:
    """Render a stub into a single destination file."""

    renderer: TemplateRenderer

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def generate(
        self,
        stub: str | Path,
        destination: str | Path,
        context: Mapping[str, Any],
        *,
        force: bool = False,
        missing: MissingPolicy | str = MissingPolicy.KEEP,
    ) -> Path:
        """Render ``stub`` with ``context`` into ``destination``.

        Raises :class:`FileExistsError` when ``destination`` exists and
        ``force`` is not set; nothing is written in that case. ``missing``
        decides what unresolved placeholders turn into.
        """

        destination = Path(destination).expanduser()
        if destination.exists() and not force:
            raise FileExistsError(f"{destination} already exists")

        self.renderer.render_file(stub, context, target=destination, missing=missing)
        LOGGER.info("wrote %s from %s", destination, stub)
        return destination
