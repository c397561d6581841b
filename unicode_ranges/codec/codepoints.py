from typing import MutableSequence

from unicode_ranges.errors import IndexOutOfRange, InvalidCodePoint

MIN_CODE_POINT = 0x000000
MAX_CODE_POINT = 0x10FFFF
MIN_SUPPLEMENTARY_CODE_POINT = 0x010000
MAX_BMP_CODE_POINT = 0xFFFF
MAX_CODE_UNIT = 0xFFFF

MIN_HIGH_SURROGATE = 0xD800
MAX_HIGH_SURROGATE = 0xDBFF
MIN_LOW_SURROGATE = 0xDC00
MAX_LOW_SURROGATE = 0xDFFF
MIN_SURROGATE = MIN_HIGH_SURROGATE
MAX_SURROGATE = MAX_LOW_SURROGATE

# compose() folded into one addition: (hi << 10) + lo + SURROGATE_OFFSET
SURROGATE_OFFSET = MIN_SUPPLEMENTARY_CODE_POINT - (MIN_HIGH_SURROGATE << 10) - MIN_LOW_SURROGATE


# ---- scalar values ----


def is_valid_scalar(value: int) -> bool:
    return MIN_CODE_POINT <= value <= MAX_CODE_POINT


def is_bmp(value: int) -> bool:
    """True if the value fits in a single code unit."""
    return MIN_CODE_POINT <= value <= MAX_BMP_CODE_POINT


def is_supplementary(value: int) -> bool:
    return MIN_SUPPLEMENTARY_CODE_POINT <= value <= MAX_CODE_POINT


def units_needed(value: int) -> int:
    """
    Number of code units used to encode a scalar value: 2 for supplementary values, else 1.
    Does not validate the value, use is_valid_scalar for that.
    """
    return 2 if value >= MIN_SUPPLEMENTARY_CODE_POINT else 1


# ---- code units ----


def is_high_surrogate(unit: int) -> bool:
    return MIN_HIGH_SURROGATE <= unit <= MAX_HIGH_SURROGATE


def is_low_surrogate(unit: int) -> bool:
    return MIN_LOW_SURROGATE <= unit <= MAX_LOW_SURROGATE


def is_surrogate(unit: int) -> bool:
    return MIN_SURROGATE <= unit <= MAX_SURROGATE


def is_surrogate_pair(high: int, low: int) -> bool:
    return is_high_surrogate(high) and is_low_surrogate(low)


# ---- conversion ----


def compose(high: int, low: int) -> int:
    """
    Combine a surrogate pair into its supplementary scalar value.
    The pair is not validated: check is_surrogate_pair first, otherwise the result is meaningless.
    """
    return (high << 10) + low + SURROGATE_OFFSET


def high_surrogate(value: int) -> int:
    """Leading surrogate of a supplementary scalar value (not validated)."""
    return (value >> 10) + (MIN_HIGH_SURROGATE - (MIN_SUPPLEMENTARY_CODE_POINT >> 10))


def low_surrogate(value: int) -> int:
    """Trailing surrogate of a supplementary scalar value (not validated)."""
    return (value & 0x3FF) + MIN_LOW_SURROGATE


def decompose(value: int) -> tuple[int, int]:
    """Inverse of compose, only meaningful for supplementary scalar values."""
    return high_surrogate(value), low_surrogate(value)


def encode(value: int) -> tuple[int] | tuple[int, int]:
    """
    Encode a scalar value as UTF-16 code units.
    :param value: A scalar value in [0, 0x10FFFF].
    :return: One code unit for BMP values, a (high, low) surrogate pair for supplementary values.
    :raises InvalidCodePoint: if the value is not a valid scalar.
    """
    if is_bmp(value):
        return (value,)
    if is_valid_scalar(value):
        return decompose(value)
    raise InvalidCodePoint(value)


def encode_into(value: int, dst: MutableSequence[int], index: int) -> int:
    """
    Write the code units of a scalar value into dst starting at index.
    Nothing is written if the value is invalid or the units do not fit.
    :return: the number of code units written (1 or 2).
    """
    units = encode(value)
    if index < 0 or index + len(units) > len(dst):
        raise IndexOutOfRange(
            f"Cannot write {len(units)} code unit(s) at index {index} into sequence of length {len(dst)}"
        )
    for offset, unit in enumerate(units):
        dst[index + offset] = unit
    return len(units)
