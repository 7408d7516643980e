"""Services: write minified packages to an output directory."""

from __future__ import annotations

import os
import sys

from ..core.errors import AssetPackError
from ..core.options import AssetOptions
from ..core.utils import matches_any_glob


def _write(output_dir: str, uri_path: str, content: str) -> str:
    target = os.path.join(output_dir, uri_path.lstrip("/"))
    os.makedirs(os.path.dirname(target), exist_ok=True)
    with open(target, "w", encoding="utf-8") as fh:
        fh.write(content)
    return target


def build_packages(
    options: AssetOptions,
    *,
    output_dir: str,
    only_globs: list[str],
    strict: bool,
    dry_run: bool,
) -> tuple[int, int]:
    """Minify each package into output_dir at its plain and cache-busted paths.

    Returns (built, failed).
    """
    keys = [k for k in sorted(options.packages) if matches_any_glob(k, only_globs)]
    if not keys:
        print("No packages to build.")
        return 0, 0

    print(f"Building {len(keys)} package(s) into '{output_dir}'...")
    built = skipped = failed = 0

    for key in keys:
        package = options.packages[key]
        if not package.paths:
            print(f"[skip] {key}: no files matched {package.filespecs}")
            skipped += 1
            continue
        targets = sorted({package.path, package.production_path})

        if dry_run:
            for t in targets:
                print(f"[dry-run] {key} -> {t}")
            built += 1
            continue

        try:
            content = package.minify(strict=strict)
        except AssetPackError as e:
            print(f"[fail] {key}: {e}", file=sys.stderr)
            failed += 1
            continue

        for t in targets:
            _write(output_dir, t, content)
            print(f"[built] {key} -> {t}")
        built += 1

    print(f"Done. built={built}, skipped={skipped}, failed={failed}.")
    return built, failed
