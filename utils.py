import enum
import logging
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Mapping, Optional, Union

COLORS = {
    "DEBUG": "\033[36m",  # cyan
    "INFO": "\033[32m",  # green
    "WARNING": "\033[33m",  # yellow
    "ERROR": "\033[31m",  # red
    "CRITICAL": "\033[1;31m",  # bold red
}
COLOR_RESET = "\033[0m"

NON_WORD_RE = re.compile(r"\W+")


class ColorFormatter(logging.Formatter):
    def format(self, record):
        color = COLORS.get(record.levelname, "")
        record.levelname = f"{color}{record.levelname}{COLOR_RESET}"
        return super().format(record)


def setup_logging(debug: bool = False):
    handler = logging.StreamHandler()
    handler.setFormatter(ColorFormatter("%(levelname)s %(message)s"))
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.DEBUG if debug else logging.INFO)


def get_identifier(path: Union[str, Path]) -> str:
    """Derive a symbol identifier from a file name: lowercase stem, non-word runs become "-"."""
    return NON_WORD_RE.sub("-", Path(path).stem.lower())


class RenderMode(enum.Enum):
    REFERENCE = "reference"  # <use> pointing into the shared symbol sheet
    INLINE = "inline"  # the full SVG body, self-contained
    EXTERNAL = "external"  # <use> pointing into a hosted sprite file

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class RenderOptions:
    """Per-call rendering options.

    Every field defaults to None, meaning "unset", so that per-call options can be
    layered over the session defaults with `merged`. Call `resolved` before use to
    fill in the boolean defaults.
    """

    identifier: Optional[str] = None
    width: Union[int, str, None] = None
    height: Union[int, str, None] = None
    css_class: Optional[str] = None
    attributes: Optional[Mapping[str, str]] = None
    url: Optional[str] = None
    external: Optional[bool] = None
    exclude_from_concatenation: Optional[bool] = None
    ignore_duplicate_ids: Optional[bool] = None
    remove_comments: Optional[bool] = None

    def merged(self, defaults: "RenderOptions") -> "RenderOptions":
        """Fill the unset fields of these options from `defaults`."""
        values = {}
        for f in fields(self):
            value = getattr(self, f.name)
            values[f.name] = getattr(defaults, f.name) if value is None else value
        return RenderOptions(**values)

    def resolved(self) -> "RenderOptions":
        external = bool(self.external)
        return RenderOptions(
            identifier=self.identifier,
            width=self.width,
            height=self.height,
            css_class=self.css_class,
            attributes=self.attributes,
            url=self.url,
            external=external,
            exclude_from_concatenation=bool(self.exclude_from_concatenation),
            ignore_duplicate_ids=bool(self.ignore_duplicate_ids) or external,
            remove_comments=True if self.remove_comments is None else bool(self.remove_comments),
        )

    @property
    def mode(self) -> RenderMode:
        if self.external:
            return RenderMode.EXTERNAL
        if self.exclude_from_concatenation:
            return RenderMode.INLINE
        return RenderMode.REFERENCE
