#!python3
"""Pack a directory of SVG icons into one hidden <svg> sheet of <symbol> elements."""

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from errors import SvgInlinerError
from inliner import SvgInliner
from utils import get_identifier, setup_logging

SVG_DIR = Path("icons")
OUTPUT = Path("build/symbols.svg")


def pack(svg_dir: Path, output: Path, remove_comments: bool = True, ignore_duplicate_ids: bool = False):
    svgs = sorted(svg_dir.glob("*.svg"))
    if not svgs:
        raise FileNotFoundError(f"No SVG files found in {svg_dir}")

    inliner = SvgInliner(remove_comments=remove_comments, ignore_duplicate_ids=ignore_duplicate_ids)
    for svg_path in tqdm(svgs, desc="Packing SVGs", unit=" files"):
        identifier = get_identifier(svg_path)
        if identifier in inliner.registry:
            logging.warning(f"{svg_path.name}: identifier {identifier} already used, skipping...")
            continue
        inliner.render_svg_file(svg_path, identifier=identifier)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(inliner.render_full_sheet(), encoding="utf-8")
    logging.info(f"Wrote {len(inliner.registry)} icons to {output}")
    return inliner


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Pack SVGs into a symbol sheet")
    parser.add_argument(
        "--svg-dir",
        type=Path,
        default=SVG_DIR,
        help="Directory containing the SVG icons",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=OUTPUT,
        help="Output SVG file",
    )
    parser.add_argument(
        "--keep-comments",
        action="store_true",
        help="Keep XML comments inside the icons",
    )
    parser.add_argument(
        "--ignore-duplicate-ids",
        action="store_true",
        help="Allow the same id attribute in more than one icon",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args()

    setup_logging(args.debug)

    try:
        pack(args.svg_dir, args.output, not args.keep_comments, args.ignore_duplicate_ids)
    except (SvgInlinerError, FileNotFoundError) as e:
        logging.error(str(e))
        sys.exit(1)
