"""Compress a file, render the embedding module, and use the generated asset."""

import importlib
import sys
import tempfile
from pathlib import Path

from zstdembed import DecodeError, EmbeddedAsset, compress_file, include_zstd, render_module

with tempfile.TemporaryDirectory() as tmpdir:
    root = Path(tmpdir)
    (root / "data").mkdir()
    text = "All human beings are born free and equal in dignity and rights.\n" * 200
    (root / "data" / "udhr_en.txt").write_text(text, encoding="utf-8")

    # ---- Build time ----
    # Compress once and render a module that builds the asset from a bytes literal.

    compressed = compress_file("data/udhr_en.txt", 19, root=root)
    print(f"[build] {compressed.source.name}: {len(text)} -> {compressed.size} bytes at level {compressed.level}")

    source = render_module({"UDHR_EN": compressed}, import_name="zstdembed")
    generated = root / "generated_assets.py"
    generated.write_text(source, encoding="utf-8")
    print(f"[build] wrote {generated.name} ({len(source.splitlines())} lines)")

    # ---- Run time ----
    # The generated module needs no file access; decompression happens on demand.

    sys.path.insert(0, str(root))
    try:
        generated_assets = importlib.import_module("generated_assets")
    finally:
        sys.path.remove(str(root))
    asset = generated_assets.UDHR_EN
    print(f"[run] {asset!r}, size()={asset.size()}, EmbeddedAsset: {isinstance(asset, EmbeddedAsset)}")
    print(f"[run] to_bytes() matches source: {asset.to_bytes() == text.encode('utf-8')}")

    # Same file, same level -> equal assets. Different level -> unequal, same content.
    again = include_zstd("data/udhr_en.txt", 19, root=root)
    faster = include_zstd("data/udhr_en.txt", 3, root=root)
    print(f"[run] level 19 == level 19: {asset == again}")
    print(f"[run] level 19 == level 3: {asset == faster} (content equal: {asset.to_bytes() == faster.to_bytes()})")

# Bytes that are not a compressed stream fail on decompression, not on construction.
broken = EmbeddedAsset[16]._new_unchecked(bytes(16))
try:
    broken.to_bytes()
except DecodeError as exc:
    print(f"[run] {type(exc).__name__}: {exc}")
