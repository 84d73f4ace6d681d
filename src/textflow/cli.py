#!/usr/bin/env python3
"""
Reflow plain text into fixed-width lines.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import parse_frontmatter, resolve_config
from .errors import LayoutError
from .hyphenation import DEFAULT_BACKEND, HyphenationAdapter, available_backends
from .layout import layout
from .logging_config import setup_logging
from .models import Align


def read_text(path: Path) -> str:
    with path.open("r", encoding="utf-8") as handle:
        return handle.read()


def write_output(path: Optional[Path], text: str) -> None:
    if path is None:
        sys.stdout.write(text + "\n")
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="textflow", description="Reflow plain text into fixed-width, aligned lines.")
    parser.add_argument("input_path", nargs="?", type=Path, help="Path to the input text file.")
    parser.add_argument("-t", "--text", help="Text to process instead of an input file.")
    parser.add_argument("-o", "--output", type=Path, help="Where to write the result (default: stdout).")
    parser.add_argument("-w", "--width", help="How many characters wide each line is (default: 80).")
    parser.add_argument(
        "-a",
        "--align",
        choices=[align.value for align in Align],
        help="How to align the output text (default: justify).",
    )
    parser.add_argument("-l", "--lang", dest="language", help="Language code used for hyphenation (default: en-us).")
    parser.add_argument(
        "-H",
        "--hyphenate",
        help="always, never or adaptive; true/false are accepted too (default: adaptive).",
    )
    parser.add_argument(
        "-s",
        "--fill-spaces",
        dest="pad_right",
        action="store_true",
        default=None,
        help="Pad every line and paragraph gap with spaces to the full width.",
    )
    parser.add_argument(
        "--backend",
        default=DEFAULT_BACKEND,
        choices=available_backends(),
        help=f"Hyphenation backend (default: {DEFAULT_BACKEND}).",
    )
    parser.add_argument("--workers", type=int, help="Lay out paragraphs on this many threads.")
    parser.add_argument("--lang-codes", action="store_true", help="List the supported language codes and exit.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if not args.lang_codes and args.text is None and args.input_path is None:
        parser.error("an input file or --text is required")

    try:
        adapter = HyphenationAdapter(args.backend)
        if args.lang_codes:
            sys.stdout.write("Supported languages:\n\n" + "\n".join(adapter.supported_languages()) + "\n")
            return 0
        text = args.text if args.text is not None else read_text(args.input_path)
        frontmatter, body = parse_frontmatter(text)
        options: Dict[str, Any] = {
            "width": args.width,
            "align": args.align,
            "hyphenate": args.hyphenate,
            "language": args.language,
            "pad_right": args.pad_right,
        }
        config = resolve_config(options, frontmatter)
        output = layout(body, config, adapter=adapter, workers=args.workers)
    except (LayoutError, OSError) as exc:
        sys.stderr.write(f"{exc}\n")
        return 2
    write_output(args.output, output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
