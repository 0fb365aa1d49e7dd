#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Rebuild slide images as an editable PPTX with a vision model + python-pptx.

- Each image is analyzed once; text blocks become editable text boxes.
- Graphics are cut out of the source image and placed as pictures.
- Optional per-slide JSON dump of the model's (repaired) answer.

Requires:
  pip install -e .
  export GEMINI_API_KEY=...   (or OPENAI_API_KEY with --backend openai)

Example:
  python restore_slides.py slide1.jpg slide2.png -o restored.pptx --json-dir out/ --backend gemini
"""
import argparse
import logging
import sys
from typing import List, Optional

from slide_restore.config import BACKENDS, Settings, create_analyzer
from slide_restore.errors import ConfigurationError
from slide_restore.pipeline import restore_slides


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Rebuild slide images as editable PPTX slides with a vision model."
    )
    ap.add_argument("images", nargs="+", help="Slide image paths (.jpg, .png, ...)")
    ap.add_argument("-o", "--output", default=None, help="Output .pptx path")
    ap.add_argument(
        "--json-dir", default=None, help="Directory to write one JSON result per image"
    )
    ap.add_argument(
        "--backend",
        default=None,
        choices=list(BACKENDS),
        help="Model provider (default: $SLIDE_RESTORE_BACKEND or gemini)",
    )
    ap.add_argument(
        "--model",
        default=None,
        help="Model name (e.g., gemini-3-flash-preview, gpt-4o-mini)",
    )
    ap.add_argument(
        "--temperature",
        type=float,
        default=None,
        help="Sampling temperature (omit to use the model's default)",
    )
    ap.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first image that cannot be analyzed",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.output and not args.json_dir:
        print("[WARN] Neither --output nor --json-dir given; results will not be saved.")

    try:
        analyzer = create_analyzer(
            Settings.from_env(),
            backend=args.backend,
            model=args.model,
            temperature=args.temperature,
        )
    except ConfigurationError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2

    result = restore_slides(
        analyzer,
        args.images,
        output_path=args.output,
        json_dir=args.json_dir,
        fail_fast=args.fail_fast,
    )

    for warning in result.warnings:
        print(warning)
    if result.output_path:
        print(f"Saved restored presentation to: {result.output_path}")
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
