from typing import Iterator

from unicode_ranges.codec.codepoints import (
    compose,
    encode,
    is_high_surrogate,
    is_low_surrogate,
    units_needed,
)
from unicode_ranges.errors import IndexOutOfRange
from unicode_ranges.utils import CodeUnitArray, CodeUnitSeq, code_unit_array

# All functions take an indexable sequence of 16-bit code units and treat a
# high surrogate directly followed by a low surrogate as one scalar value.
# Any other surrogate is an unpaired surrogate and stands for itself.


def _check_range(seq: CodeUnitSeq, start: int, limit: int | None) -> int:
    length = len(seq)
    if limit is None:
        limit = length
    if start < 0 or limit > length or start > limit:
        raise IndexOutOfRange(f"Invalid range [{start}, {limit}) for sequence of length {length}")
    return limit


def scalar_at(seq: CodeUnitSeq, index: int, limit: int | None = None) -> int:
    """
    Scalar value starting at index.
    A high surrogate is only paired with the unit after it if that unit is before limit.
    :param limit: exclusive upper bound for the read, defaults to len(seq).
    """
    length = len(seq)
    if limit is None:
        limit = length
    if limit < 0 or limit > length or index < 0 or index >= limit:
        raise IndexOutOfRange(f"Index {index} out of range [0, {limit}) for sequence of length {length}")
    c1 = int(seq[index])
    if is_high_surrogate(c1) and index + 1 < limit:
        c2 = int(seq[index + 1])
        if is_low_surrogate(c2):
            return compose(c1, c2)
    return c1


def scalar_before(seq: CodeUnitSeq, index: int, start: int = 0) -> int:
    """
    Scalar value ending just before index.
    A low surrogate is only paired with the unit before it if that unit is at or after start.
    :param start: inclusive lower bound for the read, defaults to 0.
    """
    length = len(seq)
    if start < 0 or index <= start or index > length:
        raise IndexOutOfRange(f"Index {index} out of range ({start}, {length}] for sequence of length {length}")
    c2 = int(seq[index - 1])
    if is_low_surrogate(c2) and index - 2 >= start:
        c1 = int(seq[index - 2])
        if is_high_surrogate(c1):
            return compose(c1, c2)
    return c2


def count_scalars(seq: CodeUnitSeq, start: int = 0, limit: int | None = None) -> int:
    """Number of scalar values in [start, limit); each unpaired surrogate counts as one."""
    limit = _check_range(seq, start, limit)
    n = limit - start
    i = start
    while i < limit:
        if is_high_surrogate(seq[i]) and i + 1 < limit and is_low_surrogate(seq[i + 1]):
            n -= 1
            i += 1
        i += 1
    return n


def offset_by_scalars(seq: CodeUnitSeq, index: int, delta: int, start: int = 0, limit: int | None = None) -> int:
    """
    Index reached by moving |delta| scalar values forward (delta >= 0) or backward from index,
    staying within [start, limit].
    :raises IndexOutOfRange: if index is outside [start, limit] or fewer than |delta| scalar values
        are available in the direction of travel.
    """
    limit = _check_range(seq, start, limit)
    if index < start or index > limit:
        raise IndexOutOfRange(f"Index {index} out of range [{start}, {limit}]")
    x = index
    if delta >= 0:
        moved = 0
        while x < limit and moved < delta:
            x += 1
            if is_high_surrogate(seq[x - 1]) and x < limit and is_low_surrogate(seq[x]):
                x += 1
            moved += 1
        if moved < delta:
            raise IndexOutOfRange(f"Only {moved} of {delta} scalar values available after index {index}")
    else:
        moved = 0
        while x > start and moved < -delta:
            x -= 1
            if is_low_surrogate(seq[x]) and x > start and is_high_surrogate(seq[x - 1]):
                x -= 1
            moved += 1
        if moved < -delta:
            raise IndexOutOfRange(f"Only {moved} of {-delta} scalar values available before index {index}")
    return x


def iter_scalars(seq: CodeUnitSeq, start: int = 0, limit: int | None = None) -> Iterator[int]:
    """Scalar values in [start, limit), in order."""
    limit = _check_range(seq, start, limit)
    return _iter_scalars(seq, start, limit)


def _iter_scalars(seq: CodeUnitSeq, start: int, limit: int) -> Iterator[int]:
    i = start
    while i < limit:
        value = scalar_at(seq, i, limit)
        i += units_needed(value)
        yield value


# --- str bridge ---


def to_code_units(text: str) -> CodeUnitArray:
    """UTF-16 code units of a str. Lone surrogates in the str are kept as single units."""
    units = code_unit_array()
    for c in text:
        units.extend(encode(ord(c)))
    return units


def from_code_units(units: CodeUnitSeq, start: int = 0, limit: int | None = None) -> str:
    """str with one character per scalar value in [start, limit). Unpaired surrogates are preserved."""
    return "".join(chr(value) for value in iter_scalars(units, start, limit))
