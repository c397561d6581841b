import pytest

from unicode_ranges.codec import (
    MAX_CODE_POINT,
    compose,
    decompose,
    encode,
    encode_into,
    high_surrogate,
    is_bmp,
    is_high_surrogate,
    is_low_surrogate,
    is_supplementary,
    is_surrogate,
    is_surrogate_pair,
    is_valid_scalar,
    low_surrogate,
    units_needed,
)
from unicode_ranges.errors import IndexOutOfRange, InvalidCodePoint

SAMPLE_SUPPLEMENTARY = [0x10000, 0x1F600, 0x20000, 0xE0001, 0x10FFFF]


@pytest.mark.parametrize(
    "value, valid, bmp, supplementary",
    [
        (-1, False, False, False),
        (0, True, True, False),
        (0x41, True, True, False),
        (0xD800, True, True, False),
        (0xFFFF, True, True, False),
        (0x10000, True, False, True),
        (0x10FFFF, True, False, True),
        (0x110000, False, False, False),
    ],
)
def test_scalar_predicates(value, valid, bmp, supplementary):
    assert is_valid_scalar(value) == valid
    assert is_bmp(value) == bmp
    assert is_supplementary(value) == supplementary


@pytest.mark.parametrize(
    "unit, high, low",
    [
        (0xD7FF, False, False),
        (0xD800, True, False),
        (0xDBFF, True, False),
        (0xDC00, False, True),
        (0xDFFF, False, True),
        (0xE000, False, False),
    ],
)
def test_surrogate_predicates(unit, high, low):
    assert is_high_surrogate(unit) == high
    assert is_low_surrogate(unit) == low
    assert is_surrogate(unit) == (high or low)


def test_is_surrogate_pair():
    assert is_surrogate_pair(0xD800, 0xDC00)
    assert not is_surrogate_pair(0xDC00, 0xD800)
    assert not is_surrogate_pair(0xD800, 0x41)


def test_compose_first_supplementary():
    assert compose(0xD800, 0xDC00) == 0x10000
    assert compose(0xDBFF, 0xDFFF) == 0x10FFFF
    assert compose(0xD83D, 0xDE00) == 0x1F600


@pytest.mark.parametrize("value", SAMPLE_SUPPLEMENTARY)
def test_decompose_compose(value):
    hi, lo = decompose(value)
    assert (hi, lo) == (high_surrogate(value), low_surrogate(value))
    assert is_surrogate_pair(hi, lo)
    assert compose(hi, lo) == value
    # agrees with Python's own UTF-16 codec
    assert chr(value).encode("utf-16-be") == bytes([hi >> 8, hi & 0xFF, lo >> 8, lo & 0xFF])


def test_every_supplementary_scalar_round_trips():
    seen = set()
    for value in range(0x10000, MAX_CODE_POINT + 1):
        hi, lo = decompose(value)
        assert is_surrogate_pair(hi, lo), f"{value:#x}"
        assert compose(hi, lo) == value
        seen.add((hi << 16) | lo)
    # decompose hits every one of the 1024 * 1024 surrogate pairs exactly once
    assert len(seen) == 0x100000


def test_compose_every_pair_sampled():
    for hi in range(0xD800, 0xDC00, 0x3F):
        for lo in range(0xDC00, 0xE000, 0x7F):
            value = compose(hi, lo)
            assert is_supplementary(value)
            assert decompose(value) == (hi, lo)


def test_encode():
    assert encode(0x41) == (0x41,)
    assert encode(0xD800) == (0xD800,)  # lone surrogate value encodes as itself
    assert encode(0x1F600) == (0xD83D, 0xDE00)
    assert encode(MAX_CODE_POINT) == (0xDBFF, 0xDFFF)


@pytest.mark.parametrize("value", [-1, 0x110000, 0x7FFFFFFF])
def test_encode_invalid(value):
    with pytest.raises(InvalidCodePoint) as exc_info:
        encode(value)
    assert exc_info.value.value == value
    assert isinstance(exc_info.value, ValueError)


def test_units_needed():
    assert units_needed(0) == 1
    assert units_needed(0xFFFF) == 1
    assert units_needed(0x10000) == 2
    for value in [0x41, 0xE9, 0xFFFD] + SAMPLE_SUPPLEMENTARY:
        assert units_needed(value) == len(encode(value))


def test_encode_into():
    dst = [0] * 4
    assert encode_into(0x41, dst, 0) == 1
    assert encode_into(0x1F600, dst, 1) == 2
    assert dst == [0x41, 0xD83D, 0xDE00, 0]


def test_encode_into_does_not_write_on_error():
    dst = [7, 7, 7]
    with pytest.raises(InvalidCodePoint):
        encode_into(0x110000, dst, 0)
    with pytest.raises(IndexOutOfRange):
        encode_into(0x1F600, dst, 2)
    with pytest.raises(IndexOutOfRange):
        encode_into(0x41, dst, 3)
    assert dst == [7, 7, 7]
