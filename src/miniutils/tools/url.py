"""
Percent-encoding helpers for ``url_encode`` and ``url_decode``.

Both are thin layers over ``urllib.parse``. The encoder adds one rule on top:
the first path segment is left alone so that ``scheme://`` survives.
"""

import logging
from typing import List
from urllib.parse import quote, unquote

logger = logging.getLogger(__name__)


def split_segments(url: str) -> List[str]:
    """Split on ``/`` dropping empty segments, so repeated slashes collapse."""
    return [segment for segment in url.split("/") if segment]


def encode_segment(segment: str, safe: str = "") -> str:
    """
    Percent-encode one path segment; ``/`` is never safe inside it.

    Undecodable argv bytes (surrogate escapes) are encoded as the original
    bytes, so ``"a\\udcff"`` becomes ``a%FF``.
    """
    return quote(segment, safe=safe.replace("/", ""), errors="surrogateescape")


def encode_url_path(url: str, safe: str = "") -> str:
    """
    Percent-encode the path and query of ``url`` while keeping its scheme.

    The first segment is emitted unencoded. A first segment ending in ``:``
    is a scheme and gets its ``//`` back, so ``https://host/a b`` becomes
    ``https://host/a%20b``. Every later segment is encoded on its own and the
    result is joined with ``/``.
    """
    segments = split_segments(url)
    if not segments:
        return ""

    head, rest = segments[0], segments[1:]
    encoded = [encode_segment(segment, safe) for segment in rest]
    if head.endswith(":"):
        result = head + "//" + "/".join(encoded)
    else:
        result = "/".join([head] + encoded)
    logger.debug("Encoded %d segments of %r", len(encoded), url)
    return result


def decode_url(value: str) -> str:
    """Decode ``%XX`` escapes. ``+`` is left as-is and bad UTF-8 is replaced."""
    return unquote(value, errors="replace")
