"""Code generation: render compressed assets as Python source."""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING

from zstdembed.config import DEFAULT_LINE_WIDTH
from zstdembed.serde import is_dotted_name, is_identifier

if TYPE_CHECKING:
    from collections.abc import Mapping

    from zstdembed.build._compress import CompressedAsset

_INDENT = "    "
_NON_WORD = re.compile(r"\W")


def _require_import_name(import_name: str) -> None:
    if not is_dotted_name(import_name):
        msg = f"{import_name!r} is not a dotted module name."
        raise ValueError(msg)


def asset_name_for(path: str | Path) -> str:
    """Derive a constant name from a file name, e.g. ``udhr_en.txt`` -> ``UDHR_EN``."""
    name = _NON_WORD.sub("_", Path(path).stem).upper()
    if not name or name[0].isdigit():
        name = f"_{name}"
    return name


def render_literal(data: bytes, *, line_width: int = DEFAULT_LINE_WIDTH, indent: str = "") -> str:
    """Render bytes as an implicitly concatenated bytes literal, ``line_width`` bytes per line."""
    if line_width <= 0:
        msg = "line_width must be > 0."
        raise ValueError(msg)
    chunks = [data[start : start + line_width] for start in range(0, len(data), line_width)] or [b""]
    return "\n".join(f"{indent}{chunk!r}" for chunk in chunks)


def render_expression(
    asset: CompressedAsset,
    *,
    import_name: str,
    line_width: int = DEFAULT_LINE_WIDTH,
) -> str:
    """Render the expression that builds ``asset`` through the privileged constructor."""
    _require_import_name(import_name)
    literal = render_literal(asset.data, line_width=line_width, indent=_INDENT)
    return f"{import_name}.EmbeddedAsset[{asset.size}]._new_unchecked(\n{literal},\n)"


def render_module(
    assets: Mapping[str, CompressedAsset],
    *,
    import_name: str,
    line_width: int = DEFAULT_LINE_WIDTH,
) -> str:
    """Render a complete module binding each asset to a module-level constant.

    Constants are emitted in name order so the output only depends on its inputs.
    """
    _require_import_name(import_name)
    names = sorted(assets)
    for name in names:
        if not is_identifier(name):
            msg = f"{name!r} is not a valid constant name."
            raise ValueError(msg)

    lines = [
        '"""Embedded assets generated by zstdembed. Do not edit."""',
        "",
        f"import {import_name}",
        "",
        f"__all__ = [{', '.join(repr(name) for name in names)}]",
    ]
    for name in names:
        asset = assets[name]
        lines.extend(
            [
                "",
                f"# {asset.source.name}, zstd level {asset.level}",
                f"{name} = {render_expression(asset, import_name=import_name, line_width=line_width)}",
            ]
        )
    lines.append("")
    return "\n".join(lines)
