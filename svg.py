import copy
import hashlib
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from lxml import etree

from errors import InvalidAttributeError, ParseError
from utils import RenderOptions

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
XML_NS = "http://www.w3.org/XML/1998/namespace"
NSMAP = {None: SVG_NS, "xlink": XLINK_NS}
# Prefixes accepted in raw attribute names such as "xml:lang" or "xlink:title"
PREFIXES = {"xml": XML_NS, "xlink": XLINK_NS}

SVG_TAG = f"{{{SVG_NS}}}svg"
SYMBOL_TAG = f"{{{SVG_NS}}}symbol"
USE_TAG = f"{{{SVG_NS}}}use"
XLINK_HREF = f"{{{XLINK_NS}}}href"

# Declarations every rendered root carries; redundant once embedded in an HTML document.
ROOT_DECLARATIONS = (f' xmlns="{SVG_NS}"', f' xmlns:xlink="{XLINK_NS}"')


@dataclass(frozen=True)
class SymbolEntry:
    """One registered SVG, held as a <symbol> element. Never mutated after creation."""

    identifier: str
    element: etree._Element
    digest: str
    source_digest: str

    @property
    def attributes(self) -> Dict[str, str]:
        return dict(self.element.attrib)

    def get(self, name: str) -> Optional[str]:
        return self.element.get(name)

    def ids(self) -> List[str]:
        """All id values below the symbol element itself."""
        return [str(value) for value in self.element.xpath(".//*[@id]/@id")]

    def first_child_id(self) -> Optional[str]:
        ids = self.element.xpath("./*[@id]/@id")
        return str(ids[0]) if ids else None


def md5(text: str) -> str:
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def parse_svg(content: str, identifier: str) -> etree._Element:
    # The content is already decoded, so any encoding named in <?xml ...?> is overridden
    parser = etree.XMLParser(encoding="utf-8", resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(content.strip().encode("utf-8"), parser)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise ParseError(identifier, str(e)) from e

    if etree.QName(root).localname != "svg":
        logging.warning(
            "SVG %s has unexpected root element <%s>", identifier, etree.QName(root).localname
        )
    return root


def normalize(content: str, identifier: str, options: RenderOptions) -> SymbolEntry:
    """Parse raw SVG markup and turn it into a <symbol> with `identifier` as its id.

    The parse tree is private to this call; the returned symbol only holds deep copies
    of its nodes, so it can be moved into the shared sheet without touching the source.
    """
    root = parse_svg(content, identifier)

    for elem in root.xpath("descendant-or-self::*[@fill='transparent']"):
        elem.set("fill", "none")

    if options.remove_comments:
        etree.strip_elements(root, etree.Comment, with_tail=False)

    # Every inlined icon gets the generic "svg" class
    css_class = root.get("class")
    if not css_class:
        root.set("class", "svg")
    elif "svg" not in css_class.split():
        root.set("class", f"{css_class} svg")

    symbol = etree.Element(SYMBOL_TAG, nsmap=NSMAP)
    # lxml keeps namespace declarations out of attrib, so xmlns is never copied
    for name, value in root.attrib.items():
        symbol.set(name, value)
    symbol.set("id", identifier)

    symbol.text = root.text
    for child in root:
        symbol.append(copy.deepcopy(child))

    return SymbolEntry(
        identifier=identifier,
        element=symbol,
        digest=md5(to_string(symbol)),
        source_digest=md5(content),
    )


def to_string(element: etree._Element) -> str:
    """Serialize `element` with an explicit closing tag on every element, never <tag/>."""
    element = copy.deepcopy(element)
    for elem in element.iter(etree.Element):
        if elem.text is None and len(elem) == 0:
            # An empty text node is enough to stop libxml2 from writing a short tag
            elem.text = ""
    return etree.tostring(element, encoding="unicode", with_tail=False)


def strip_root_namespaces(markup: str) -> str:
    """Drop the canonical SVG and xlink declarations from the root <svg> start tag."""
    end = markup.find(">")
    head = markup[:end]
    if end < 0 or not head.startswith("<svg "):
        return markup
    for declaration in ROOT_DECLARATIONS:
        head = head.replace(declaration, "", 1)
    return head + markup[end:]


def attribute_name(name: str) -> str:
    """Turn a prefixed attribute name like "xml:lang" into lxml's "{namespace}lang" form."""
    prefix, colon, local = name.partition(":")
    if not colon:
        return name
    if prefix not in PREFIXES:
        raise InvalidAttributeError(name)
    return f"{{{PREFIXES[prefix]}}}{local}"
