"""Deterministic 32-bit string hashing.

Produces the same values as the browser-side ``hashCode`` helper, so keys
computed here and in the extension UI agree.
"""

_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN_BIT = 0x80000000


def _utf16_code_units(text: str) -> list[int]:
    """Split text into UTF-16 code units (astral characters become surrogate pairs)."""
    data = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)]


def hash_code(text: str | None) -> int:
    """Hash a string to a signed 32-bit integer.

    Folds each code unit with ``hash * 31 + unit`` and wraps to 32 bits
    after every step.

    Args:
        text: String to hash. None and "" hash to 0.

    Returns:
        Signed 32-bit hash in [-2**31, 2**31 - 1].

    Example:
        >>> hash_code("hello")
        99162322
    """
    if not text:
        return 0

    acc = 0
    for unit in _utf16_code_units(text):
        acc = (acc * 31 + unit) & _UINT32_MASK

    # Reinterpret as two's complement
    if acc & _INT32_SIGN_BIT:
        acc -= 1 << 32
    return acc
