"""Compress a file and print the Python code that embeds it."""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

from zstdembed.build import (
    asset_name_for,
    compress_file,
    find_project_root,
    render_expression,
    render_module,
    resolve_import_name,
)
from zstdembed.config import BuildConfig, load_config
from zstdembed.errors import BuildError
from zstdembed.serde import is_dotted_name, is_identifier

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zstdembed", description=__doc__)
    parser.add_argument("path", help="File to embed; relative paths resolve against the project root.")
    parser.add_argument("level", type=int, help="Zstandard compression level.")
    parser.add_argument("--name", help="Constant name in the generated module (default: from the file name).")
    parser.add_argument("--root", type=Path, help="Project root for relative paths (default: from configuration).")
    parser.add_argument("--import-name", help="Module name generated code imports (default: resolved).")
    parser.add_argument("--config", type=Path, help="pyproject.toml to read [tool.zstdembed] from.")
    parser.add_argument("--expression", action="store_true", help="Print only the construction expression.")
    parser.add_argument("-o", "--output", type=Path, help="Write to this file instead of stdout.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def _load(args: argparse.Namespace) -> BuildConfig:
    """Load configuration and apply command-line overrides."""
    config_path = args.config if args.config is not None else find_project_root() / "pyproject.toml"
    config = load_config(config_path)
    if args.root is not None:
        config = replace(config, root=args.root)
    if args.import_name is not None:
        config = replace(config, import_name=args.import_name)
    return config


def main(argv: Sequence[str] | None = None) -> int:
    """Run the code generator. Return the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    name = args.name if args.name is not None else asset_name_for(args.path)
    if not is_identifier(name):
        parser.error(f"--name {name!r} is not a valid Python identifier")
    if args.import_name is not None and not is_dotted_name(args.import_name):
        parser.error(f"--import-name {args.import_name!r} is not a dotted module name")

    try:
        config = _load(args)
    except (tomllib.TOMLDecodeError, OSError, TypeError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    try:
        asset = compress_file(args.path, args.level, root=config.root)
        import_name = config.import_name or resolve_import_name(config.distribution)
    except BuildError as exc:
        logger.error("%s", exc)
        return 1

    if args.expression:
        output = render_expression(asset, import_name=import_name, line_width=config.line_width) + "\n"
    else:
        output = render_module({name: asset}, import_name=import_name, line_width=config.line_width)

    if args.output is not None:
        try:
            args.output.write_text(output, encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot write %s: %s", args.output, exc.strerror or exc)
            return 1
        logger.debug("Wrote %s (%d compressed bytes)", args.output, asset.size)
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
