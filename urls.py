from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from errors import InvalidUrlError


@dataclass(frozen=True)
class UrlParts:
    scheme: Optional[str] = None
    host: Optional[str] = None
    port: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    path: Optional[str] = None
    query: Optional[str] = None
    fragment: Optional[str] = None


def split_url(url: str) -> UrlParts:
    """Split a URL into its components without normalizing or decoding any of them.

    Empty components come back as None, so "/sprite.svg?#" has neither query nor fragment.
    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidUrlError(url) from e

    user = password = host = port = None
    if parts.netloc:
        userinfo, at, hostport = parts.netloc.rpartition("@")
        if at:
            user, colon, password = userinfo.partition(":")
            if not colon:
                password = None

        # The port is whatever follows the last colon outside an IPv6 literal
        host, colon, port = hostport.rpartition(":")
        if not colon or "]" in port:
            host, port = hostport, None
        elif port and not port.isdigit():
            raise InvalidUrlError(url)

    return UrlParts(
        scheme=parts.scheme or None,
        host=host or None,
        port=port or None,
        user=user or None,
        password=password or None,
        path=parts.path or None,
        query=parts.query or None,
        fragment=parts.fragment or None,
    )


def build_url(parts: UrlParts) -> str:
    """Reassemble a URL from its components. Nothing is percent-encoded."""
    scheme = f"{parts.scheme}://" if parts.scheme else ""
    if not scheme and parts.host:
        # Keep scheme-relative URLs ("//cdn.example.com/...") intact
        scheme = "//"
    user = parts.user or ""
    password = f":{parts.password}" if parts.password else ""
    password = f"{password}@" if user or password else ""
    host = parts.host or ""
    port = f":{parts.port}" if parts.port else ""
    path = parts.path or ""
    query = f"?{parts.query}" if parts.query else ""
    fragment = f"#{parts.fragment}" if parts.fragment else ""
    return f"{scheme}{user}{password}{host}{port}{path}{query}{fragment}"
