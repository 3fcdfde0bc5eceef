"""Command line interface for stubsmith."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import GeneratorConfig, find_config, load_config
from .errors import ConfigurationError
from .generator import GeneratorCommand, GeneratorOptions
from .template import MissingPolicy, TemplateRenderingError

LOGGER = logging.getLogger(__name__)


def _add_config_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a stubsmith.toml file (defaults to ./stubsmith.toml when present)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate files from stubs for a resource name")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    make_parser = subparsers.add_parser("make", help="generate a file from a stub")
    make_parser.add_argument("type", help="Generator type, e.g. model, controller, seed, view")
    make_parser.add_argument("name", help="The name of class being generated.")
    make_parser.add_argument(
        "--plain", action="store_true", help="Generate an empty class."
    )
    make_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Warning: override the file if it already exists",
    )
    make_parser.add_argument(
        "--stub",
        nargs="?",
        const=None,
        default=None,
        help="The name of the stub you would like to generate.",
    )
    make_parser.add_argument(
        "--missing",
        choices=[policy.value for policy in MissingPolicy],
        default=MissingPolicy.KEEP.value,
        help="Behaviour when a stub placeholder cannot be resolved",
    )
    make_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Project root the generated file is written into",
    )
    _add_config_argument(make_parser)

    names_parser = subparsers.add_parser(
        "names", help="print the names derived for a resource without writing anything"
    )
    names_parser.add_argument("type", help="Generator type whose settings are applied")
    names_parser.add_argument("name", help="Resource name to resolve")
    _add_config_argument(names_parser)

    stubs_parser = subparsers.add_parser("stubs", help="list the configured stubs")
    _add_config_argument(stubs_parser)

    return parser


def _load(args: argparse.Namespace) -> GeneratorConfig:
    path = args.config if args.config is not None else find_config(Path.cwd())
    if path is not None:
        LOGGER.debug("loading configuration from %s", path)
    return load_config(path)


def _handle_make(args: argparse.Namespace) -> int:
    command = GeneratorCommand(_load(args))
    options = GeneratorOptions(
        type=args.type.lower(),
        stub=args.stub,
        plain=args.plain,
        force=args.force,
        missing=args.missing,
    )
    try:
        path = command.run(args.name, options, args.directory)
    except FileExistsError as exc:
        print(f"error: {exc} (use --force to overwrite)", file=sys.stderr)
        return 1
    print(f"Created {path}")
    return 0


def _handle_names(args: argparse.Namespace) -> int:
    command = GeneratorCommand(_load(args))
    names = command.resolve(args.type.lower(), args.name)
    sys.stdout.write(names.model_dump_json(indent=2))
    sys.stdout.write("\n")
    return 0


def _handle_stubs(args: argparse.Namespace) -> int:
    config = _load(args)
    for key in sorted(config.stubs):
        print(f"{key}\t{config.stubs[key]}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "make":
            return _handle_make(args)
        if args.command == "names":
            return _handle_names(args)
        return _handle_stubs(args)
    except (ConfigurationError, TemplateRenderingError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
