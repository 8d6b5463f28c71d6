#!python3
"""Render a single SVG file the way it would be embedded in a page."""

import argparse
import logging
import sys
from pathlib import Path

from errors import SvgInlinerError
from inliner import SvgInliner
from utils import RenderMode, setup_logging


def render(
    path: Path,
    mode: RenderMode = RenderMode.REFERENCE,
    with_sheet: bool = False,
    **options,
) -> str:
    inliner = SvgInliner()
    markup = inliner.render_svg_file(
        path,
        external=mode is RenderMode.EXTERNAL,
        exclude_from_concatenation=mode is RenderMode.INLINE,
        **options,
    )
    if with_sheet:
        markup = "\n".join(m for m in (inliner.render_full_sheet(), markup) if m)
    return markup


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Render an SVG file for inlining into HTML")
    parser.add_argument("path", type=Path, help="SVG file to render")
    parser.add_argument(
        "--mode",
        type=RenderMode,
        choices=list(RenderMode),
        default=RenderMode.REFERENCE,
        help="reference (<use> into the sheet), inline or external (<use> into a hosted sprite)",
    )
    parser.add_argument("--url", help="Sprite URL, required for --mode external")
    parser.add_argument("--identifier", help="Symbol id, defaults to the file name")
    parser.add_argument("--class", dest="css_class", help="Extra CSS classes")
    parser.add_argument("--width")
    parser.add_argument("--height")
    parser.add_argument(
        "--keep-comments",
        action="store_true",
        help="Keep XML comments inside the icon",
    )
    parser.add_argument(
        "--with-sheet",
        action="store_true",
        help="Also print the symbol sheet the reference points into",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args()

    setup_logging(args.debug)

    if not args.path.exists():
        logging.error(f"{args.path} does not exist")
        sys.exit(1)

    try:
        print(
            render(
                args.path,
                args.mode,
                args.with_sheet,
                identifier=args.identifier,
                url=args.url,
                css_class=args.css_class,
                width=args.width,
                height=args.height,
                remove_comments=not args.keep_comments,
            )
        )
    except SvgInlinerError as e:
        logging.error(str(e))
        sys.exit(1)
