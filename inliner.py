"""Deduplicate SVG icons and render them as <use> references, inline SVGs or external sprite links.

Usage:
    inliner = SvgInliner(css_class="icon")
    html = inliner.render_svg_file("icons/arrow-left.svg", width=16)
    html += inliner.render_svg(raw_markup, identifier="logo", exclude_from_concatenation=True)
    html += inliner.render_full_sheet()

One SvgInliner is one session: its symbols accumulate until the sheet is rendered.
It holds mutable state and is not safe to share between threads.
"""

import copy
import dataclasses
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from lxml import etree

from errors import DuplicateIdError, MissingFragmentError, MissingUrlError
from svg import (
    NSMAP,
    SVG_TAG,
    USE_TAG,
    XLINK_HREF,
    SymbolEntry,
    attribute_name,
    md5,
    normalize,
    strip_root_namespaces,
    to_string,
)
from urls import build_url, split_url
from utils import RenderMode, RenderOptions, get_identifier


class Registry:
    """Symbols registered during one session and the sheet that collects them."""

    def __init__(self) -> None:
        self.symbols: Dict[str, SymbolEntry] = {}
        # id attribute value -> identifier of the symbol that introduced it
        self.seen_ids: Dict[str, str] = {}
        self.sheet = etree.Element(SVG_TAG, nsmap=NSMAP)
        self.sheet.set("hidden", "hidden")

    def __contains__(self, identifier: str) -> bool:
        return identifier in self.symbols

    def __len__(self) -> int:
        return len(self.symbols)

    def get_or_create(
        self, identifier: str, content: Optional[str], options: RenderOptions
    ) -> SymbolEntry:
        """Return the symbol registered as `identifier`, normalizing `content` on first use.

        The first registration wins: later calls get the stored symbol back even when
        their content or options differ.
        """
        entry = self.symbols.get(identifier)
        if entry is not None:
            if content is not None and md5(content) != entry.source_digest:
                logging.debug("Symbol %s already registered, ignoring different content", identifier)
            return entry

        if content is None:
            raise KeyError(identifier)

        entry = normalize(content, identifier, options)
        if not options.ignore_duplicate_ids:
            self.check_duplicate_ids(entry)

        self.symbols[identifier] = entry
        logging.debug("Registered symbol %s", identifier)
        return entry

    def check_duplicate_ids(self, entry: SymbolEntry):
        ids = entry.ids()
        # Check everything before recording anything, so a failure leaves no trace
        for value in ids:
            owner = self.seen_ids.get(value)
            if owner is not None and owner != entry.identifier:
                raise DuplicateIdError(entry.identifier, value, owner)
        for value in ids:
            self.seen_ids.setdefault(value, entry.identifier)

    def add_to_sheet(self, entry: SymbolEntry):
        if entry.element.getparent() is self.sheet:
            return
        self.sheet.append(entry.element)
        logging.debug("Added symbol %s to the sheet", entry.identifier)

    def render_sheet(self) -> str:
        if not len(self.sheet):
            return ""
        return to_string(self.sheet)


def external_url(entry: SymbolEntry, url: Optional[str]) -> str:
    """Point `url` at the entry inside a hosted sprite, adding a fragment and cache buster if missing."""
    if not url:
        raise MissingUrlError()

    parts = split_url(url)
    if not parts.fragment:
        fragment = entry.first_child_id()
        if fragment is None:
            raise MissingFragmentError(entry.identifier)
        parts = dataclasses.replace(parts, fragment=fragment)
    if not parts.query:
        parts = dataclasses.replace(parts, query=entry.digest[:8])
    return build_url(parts)


def is_zero(value) -> bool:
    """True for 0, "0", "0.0" and friends, which count as no size at all."""
    try:
        return float(value) == 0
    except (TypeError, ValueError):
        return False


def set_attributes(entry: SymbolEntry, svg: etree._Element, options: RenderOptions):
    classes = []
    for token in f"{options.css_class or ''} {entry.get('class') or ''}".split():
        if token not in classes:
            classes.append(token)
    svg.set("class", " ".join(classes))

    for name, value in (("width", options.width), ("height", options.height)):
        if is_zero(value):
            value = None
        value = value or entry.get(name)
        if value is not None:
            svg.set(name, str(value))

    for name in ("viewBox", "preserveAspectRatio"):
        if entry.get(name) is not None:
            svg.set(name, entry.get(name))

    svg.set("role", "img")
    svg.set("aria-hidden", "true")

    for name, value in (options.attributes or {}).items():
        svg.set(attribute_name(name), str(value))


def render_symbol(entry: SymbolEntry, options: RenderOptions) -> str:
    svg = etree.Element(SVG_TAG, nsmap=NSMAP)

    mode = options.mode
    if mode is RenderMode.EXTERNAL:
        use = etree.SubElement(svg, USE_TAG)
        use.set(XLINK_HREF, external_url(entry, options.url))
    elif mode is RenderMode.REFERENCE:
        use = etree.SubElement(svg, USE_TAG)
        use.set(XLINK_HREF, f"#{entry.identifier}")
    else:
        svg.text = entry.element.text
        for child in entry.element:
            svg.append(copy.deepcopy(child))
        for name, value in entry.attributes.items():
            if name != "id":
                svg.set(name, value)

    set_attributes(entry, svg, options)

    return strip_root_namespaces(to_string(svg))


class SvgInliner:
    def __init__(self, **default_options) -> None:
        self.defaults = RenderOptions(**default_options)
        self.registry = Registry()

    def _options(self, options: dict) -> RenderOptions:
        return RenderOptions(**options).merged(self.defaults).resolved()

    def render_svg(self, content: str, **options) -> str:
        """Render SVG markup. Without an identifier, the md5 of the content is used."""
        opts = self._options(options)
        if opts.identifier is None:
            opts = dataclasses.replace(opts, identifier=md5(content))
        return self._render(content, opts)

    def render_svg_file(self, path: Union[str, Path], **options) -> str:
        """Render an SVG file. The file is only read if its identifier is not registered yet."""
        path = Path(path)
        if not path.exists():
            logging.warning(f"SVG file {path} does not exist, skipping...")
            return ""

        opts = self._options(options)
        if opts.identifier is None:
            opts = dataclasses.replace(opts, identifier=get_identifier(path))

        content = None
        if opts.identifier not in self.registry:
            content = path.read_text(encoding="utf-8").strip()
        return self._render(content, opts)

    def render_full_sheet(self) -> str:
        """The hidden <svg> holding every symbol referenced so far, or "" if there is none."""
        return self.registry.render_sheet()

    def _render(self, content: Optional[str], options: RenderOptions) -> str:
        if options.mode is RenderMode.EXTERNAL and not options.url:
            raise MissingUrlError()

        entry = self.registry.get_or_create(options.identifier, content, options)
        if options.mode is RenderMode.REFERENCE:
            self.registry.add_to_sheet(entry)
        return render_symbol(entry, options)
