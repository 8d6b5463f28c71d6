class SvgInlinerError(ValueError):
    """Base class for every error raised while inlining SVGs."""


class ParseError(SvgInlinerError):
    """Raised when SVG content is not well-formed XML."""

    def __init__(self, identifier: str, reason: str = "") -> None:
        message = f"Could not load SVG: {identifier}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.identifier = identifier


class DuplicateIdError(SvgInlinerError):
    """Raised when an id attribute is already used by another registered SVG."""

    def __init__(self, identifier: str, id: str, owner: str) -> None:
        super().__init__(
            f"Duplicate ID {id!r} within embedded SVG {identifier} (already used by {owner}). "
            "If this is intentional, pass ignore_duplicate_ids=True"
        )
        self.identifier = identifier
        self.id = id
        self.owner = owner


class MissingUrlError(SvgInlinerError):
    def __init__(self) -> None:
        super().__init__(
            "No URL option set. When using the `external` option, you need to supply an URL option as well."
        )


class MissingFragmentError(SvgInlinerError):
    def __init__(self, identifier: str) -> None:
        super().__init__(
            f"No fragment set for {identifier}. When using the `external` option, "
            "either provide a URL fragment or set an ID within the SVG"
        )
        self.identifier = identifier


class InvalidUrlError(SvgInlinerError):
    def __init__(self, url: str) -> None:
        super().__init__(f"Could not parse URL: {url}")
        self.url = url


class InvalidAttributeError(SvgInlinerError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown namespace prefix in attribute name: {name}")
        self.name = name
