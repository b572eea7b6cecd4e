"""Build-time half of zstdembed: compress source files and render embedding code."""

from zstdembed.build._compress import (
    CompressedAsset,
    compress_file,
    find_project_root,
    include_zstd,
    resolve_source,
)
from zstdembed.build._render import asset_name_for, render_expression, render_literal, render_module
from zstdembed.build._resolve import resolve_import_name

__all__ = [
    "CompressedAsset",
    "asset_name_for",
    "compress_file",
    "find_project_root",
    "include_zstd",
    "render_expression",
    "render_literal",
    "render_module",
    "resolve_import_name",
    "resolve_source",
]
