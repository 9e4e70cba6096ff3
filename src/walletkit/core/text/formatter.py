"""Display text formatting helpers.

None of these functions raise. Degenerate input (None, empty string)
yields an empty string, and undecodable payloads are returned as given.
"""

import re
from urllib.parse import unquote

import structlog

log = structlog.get_logger(__name__)

ELLIPSIS = "..."

HEX_PREFIX = "0x"

_HEX_PAIR = re.compile(r"[0-9a-f]{2}")
# A "%" that does not start a complete escape is a malformed sequence
_BROKEN_ESCAPE = re.compile(r"%(?![0-9a-fA-F]{2})")
_SCHEME = re.compile(r"https?://")
_ORIGIN_LABEL = re.compile(r"^([^.]+\.)?(\S+)\.")


def truncate_with_ellipsis(
    text: str, length: int = 5, remove_last_comma: bool = False
) -> str:
    """Cut text to length characters and append an ellipsis.

    Args:
        text: Text to truncate.
        length: Maximum characters kept before the ellipsis.
        remove_last_comma: Drop a trailing comma left by the cut.

    Returns:
        Text unchanged if it fits, otherwise the cut text followed by "...".

    Example:
        >>> truncate_with_ellipsis("hello world", 5)
        'hello...'
        >>> truncate_with_ellipsis("ab,cd", 3, remove_last_comma=True)
        'ab...'
    """
    if len(text) <= length:
        return text

    cut = text[: max(length, 0)]
    if remove_last_comma and cut.endswith(","):
        cut = cut[:-1]
    return f"{cut}{ELLIPSIS}"


def shorten_description(desc: str | None, length: int = 50) -> str:
    """Shorten a description to length characters plus an ellipsis.

    Example:
        >>> shorten_description("Swap 1 BTC for 30 ETH", 8)
        'Swap 1 B...'
    """
    if not desc:
        return ""
    if len(desc) <= length:
        return desc
    return desc[:length] + ELLIPSIS


def decode_hex_payload(payload: str) -> str:
    """Decode a 0x-prefixed hex string as UTF-8 text.

    Each pair of lowercase hex digits is treated as one byte. Anything else,
    uppercase digits included, is kept literally.

    Args:
        payload: Candidate hex payload, e.g. a signing message.

    Returns:
        Decoded text, or payload itself when it lacks the 0x prefix or
        does not decode to valid UTF-8.

    Example:
        >>> decode_hex_payload("0x68656c6c6f")
        'hello'
    """
    if not payload.startswith(HEX_PREFIX):
        return payload

    encoded = _HEX_PAIR.sub(lambda m: "%" + m.group(0), payload[len(HEX_PREFIX) :])
    if _BROKEN_ESCAPE.search(encoded):
        log.debug("hex_payload_malformed_escape", length=len(payload))
        return payload

    try:
        return unquote(encoded, encoding="utf-8", errors="strict")
    except UnicodeDecodeError:
        log.debug("hex_payload_decode_failed", length=len(payload))
        return payload


def extract_origin_label(origin: str) -> str:
    """Extract the main domain label from an origin.

    The scheme is stripped, an optional leading label (e.g. "www.") is
    skipped, and everything up to the final dot of the host is returned.

    Args:
        origin: Site origin such as "https://app.uniswap.org".

    Returns:
        Main label, or origin unchanged when it has no dotted host.

    Example:
        >>> extract_origin_label("https://www.example.com/path")
        'example'
    """
    host = _SCHEME.sub("", origin, count=1)
    match = _ORIGIN_LABEL.match(host)
    if not match:
        return origin
    return match.group(2) or origin
