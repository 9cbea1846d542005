#!/usr/bin/env python3
"""
Bundle HTML, CSS, JS, images and video into one self-contained file.

Features
- Takes files and/or directories (directories are walked recursively)
- Sorts inputs by extension; unsupported files are listed and skipped
- Inlines images and video as base64 data URIs wherever CSS url(...) or
  HTML src="..." references them by filename
- Writes either a standalone .html page or a .js web component whose markup
  and styles live in a shadow root

Usage
    stackpack index.html style.css app.js logo.png -n landing
    stackpack site/ -k isolated-component -c MyWidget -d dist/
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import pathlib
import sys
from typing import List

from .bundler import bundle_classified
from .classifier import Category, classify
from .component import tag_name_for
from .errors import StackPackError, exit_code_for_exception
from .export import bytes_human, export_artifact
from .models import InputFile, OutputKind
from .settings import load_settings

IGNORED_DIRS = {".git", "node_modules", "__pycache__"}


def collect_inputs(paths: List[str]) -> List[InputFile]:
    """Turn CLI paths into input files, keeping argument order.

    Directory contents are added in sorted order, named relative to the directory.
    """
    inputs: List[InputFile] = []
    for raw in paths:
        root = pathlib.Path(raw)
        if root.is_dir():
            for p in sorted(root.rglob("*")):
                if p.is_symlink() or not p.is_file():
                    continue
                rel = p.relative_to(root)
                if any(part in IGNORED_DIRS for part in rel.parts):
                    continue
                inputs.append(InputFile.from_path(p, name=rel.as_posix()))
        else:
            # missing files surface as read failures during loading
            inputs.append(InputFile.from_path(root))
    return inputs


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Bundle web assets into a single HTML page or web component")
    ap.add_argument("paths", nargs="+", help="Files or directories to bundle")
    ap.add_argument(
        "-k", "--kind",
        choices=[k.value for k in OutputKind],
        help="Output kind (default: standalone-document, or STACKPACK_OUTPUT_KIND)",
    )
    ap.add_argument("-n", "--name", help="Output filename; .html or .js is appended when missing")
    ap.add_argument("-c", "--component-name", help="Class name of the web component (default: StackPackComponent)")
    ap.add_argument("-d", "--out-dir", default=".", help="Directory to write the bundle to (default: current directory)")
    ap.add_argument(
        "--require",
        action="append",
        default=[],
        choices=[c.value for c in Category if c is not Category.UNSUPPORTED],
        help="Fail unless at least one file of this category is given (repeatable)",
    )
    ap.add_argument("--config", type=pathlib.Path, help="JSON settings file")
    return ap


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
        logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

        kind = OutputKind(args.kind) if args.kind else settings.output_kind
        component_name = args.component_name or settings.component_name

        print(f"📂 Collecting files from {len(args.paths)} path(s)...", file=sys.stderr)
        inputs = collect_inputs(args.paths)

        classified = classify(inputs)
        classified.require(*(Category(c) for c in args.require))
        if classified.skipped:
            print(f"⚠️  Skipped {len(classified.skipped)} unsupported file(s): {', '.join(classified.skipped)}", file=sys.stderr)
        print(
            f"✓ {classified.file_count} files: {len(classified.markup)} HTML, {len(classified.stylesheets)} CSS, "
            f"{len(classified.scripts)} JS, {len(classified.images)} images, {len(classified.videos)} videos",
            file=sys.stderr,
        )

        if kind is OutputKind.COMPONENT:
            print(f"🔨 Generating web component <{tag_name_for(component_name)}>...", file=sys.stderr)
        else:
            print("🔨 Generating standalone HTML...", file=sys.stderr)
        result = asyncio.run(bundle_classified(classified, kind, args.name, component_name))

        out_path = export_artifact(result.content, result.filename, args.out_dir)
        print(f"💾 Wrote {bytes_human(out_path.stat().st_size)} to {out_path}", file=sys.stderr)
        return 0
    except (StackPackError, OSError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return exit_code_for_exception(e)


if __name__ == "__main__":
    raise SystemExit(main())
