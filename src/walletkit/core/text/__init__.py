"""Text formatting, hashing and date rendering."""

from walletkit.core.text.dates import DEFAULT_DATE_FORMAT, format_date
from walletkit.core.text.formatter import (
    ELLIPSIS,
    decode_hex_payload,
    extract_origin_label,
    shorten_description,
    truncate_with_ellipsis,
)
from walletkit.core.text.hashing import hash_code

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "ELLIPSIS",
    "decode_hex_payload",
    "extract_origin_label",
    "format_date",
    "hash_code",
    "shorten_description",
    "truncate_with_ellipsis",
]
