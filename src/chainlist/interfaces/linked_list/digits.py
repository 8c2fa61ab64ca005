"""Decimal text for list elements of any magnitude.

``str(int)`` refuses values with more digits than the interpreter's
``sys.get_int_max_str_digits()``. Elements are unbounded, so large values are
converted a fixed-size chunk of digits at a time, each chunk staying well
under that limit.
"""

DIGIT_CHUNK = 1000
_CHUNK_BASE = 10**DIGIT_CHUNK


def decimal_text(value: int) -> str:
    """Return the base-10 text of ``value`` with no digit-count limit.

    Args:
        value: The integer to render.

    Returns:
        str: Same text as ``str(value)`` would give without a digit limit.
    """
    magnitude = abs(value)
    if magnitude < _CHUNK_BASE:
        return str(value)
    chunks = []
    while magnitude:
        magnitude, low = divmod(magnitude, _CHUNK_BASE)
        chunks.append(low)
    text = str(chunks.pop()) + "".join(
        f"{chunk:0{DIGIT_CHUNK}d}" for chunk in reversed(chunks)
    )
    return f"-{text}" if value < 0 else text
