import numpy as np
import pytest

from unicode_ranges.classify.ranges import (
    RangeClassifier,
    build_range_table,
    label_identifier,
    read_range_file,
)
from unicode_ranges.codec import MAX_CODE_POINT
from unicode_ranges.errors import InvalidCodePoint


@pytest.fixture
def small_classifier():
    return RangeClassifier([0, 0x80, 0x100, 0x10000], ["ascii", "latin1", None, "astral"])


def linear_classify(classifier: RangeClassifier, scalar: int):
    label = None
    for boundary, entry_label in zip(classifier.boundaries, classifier.labels):
        if boundary > scalar:
            break
        label = entry_label
    return label


@pytest.mark.parametrize(
    "scalar, expected",
    [
        (0, "ascii"),
        (0x7F, "ascii"),
        (0x80, "latin1"),
        (0xFF, "latin1"),
        (0x100, None),
        (0xFFFF, None),
        (0x10000, "astral"),
        (MAX_CODE_POINT, "astral"),
    ],
)
def test_classify(small_classifier, scalar, expected):
    assert small_classifier.classify(scalar) == expected


@pytest.mark.parametrize("scalar", [-1, MAX_CODE_POINT + 1])
def test_classify_invalid(small_classifier, scalar):
    with pytest.raises(InvalidCodePoint):
        small_classifier.classify(scalar)
    with pytest.raises(InvalidCodePoint) as exc_info:
        small_classifier.classify_many([0x41, scalar, -5])
    assert exc_info.value.value == scalar


@pytest.mark.parametrize("scalars", [[0x41, 2**70], [0x41, -(2**70)], [1.5], ["A"], [0x41, None]])
def test_classify_many_rejects_non_scalars(small_classifier, scalars):
    with pytest.raises(InvalidCodePoint) as exc_info:
        small_classifier.classify_many(scalars)
    assert exc_info.value.value == scalars[-1]


def test_classify_many_rejects_bad_arrays(small_classifier):
    with pytest.raises(InvalidCodePoint):
        small_classifier.classify_many(np.array([0.0, 1.5]))
    with pytest.raises(InvalidCodePoint) as exc_info:
        small_classifier.classify_many(np.array([0x41, 2**63 - 1], dtype=np.int64))
    assert exc_info.value.value == 2**63 - 1
    with pytest.raises(InvalidCodePoint):
        small_classifier.classify_many(np.array([2**64 - 1], dtype=np.uint64))


def test_single_entry_classifier():
    classifier = RangeClassifier([0], ["all"])
    assert classifier.classify(0) == "all"
    assert classifier.classify(MAX_CODE_POINT) == "all"
    assert list(classifier.ranges()) == [(0, MAX_CODE_POINT, "all")]


@pytest.mark.parametrize(
    "boundaries, labels",
    [
        ([], []),
        ([0, 10], ["a"]),
        ([1, 10], ["a", "b"]),
        ([0, 10, 10], ["a", "b", "c"]),
        ([0, 20, 10], ["a", "b", "c"]),
        ([0, MAX_CODE_POINT + 1], ["a", "b"]),
    ],
)
def test_invalid_tables(boundaries, labels):
    with pytest.raises(ValueError):
        RangeClassifier(boundaries, labels)


def test_binary_search_matches_linear_scan(small_classifier):
    boundaries = list(range(0, 0x3000, 0x101))
    classifier = RangeClassifier(boundaries, [i % 7 for i in range(len(boundaries))])
    for c in (small_classifier, classifier):
        probes = set(c.boundaries) | {b - 1 for b in c.boundaries[1:]} | set(range(0, 0x3100, 13)) | {MAX_CODE_POINT}
        for scalar in sorted(probes):
            assert c.classify(scalar) == linear_classify(c, scalar), f"Mismatch at {scalar:#x}"


def test_classify_many(small_classifier):
    scalars = [0, 0x80, 0x100, 0x10000, 0x41, MAX_CODE_POINT]
    expected = [small_classifier.classify(s) for s in scalars]
    assert small_classifier.classify_many(scalars) == expected
    assert small_classifier.classify_many(np.array(scalars, dtype=np.uint32)) == expected
    assert small_classifier.classify_many(iter(scalars)) == expected
    assert small_classifier.classify_many([]) == []


def test_ranges(small_classifier):
    assert list(small_classifier.ranges()) == [
        (0, 0x7F, "ascii"),
        (0x80, 0xFF, "latin1"),
        (0x100, 0xFFFF, None),
        (0x10000, MAX_CODE_POINT, "astral"),
    ]
    assert small_classifier.ranges_of("latin1") == [(0x80, 0xFF)]
    assert small_classifier.ranges_of("missing") == []
    assert small_classifier.label_set() == {"ascii", "latin1", None, "astral"}
    assert len(small_classifier) == 4


def test_hash_is_stable(small_classifier):
    same = RangeClassifier([0, 0x80, 0x100, 0x10000], ["ascii", "latin1", None, "astral"])
    other = RangeClassifier([0, 0x80, 0x100, 0x10000], ["ascii", "latin1", None, "other"])
    assert small_classifier.hash() == same.hash()
    assert small_classifier.hash() != other.hash()
    assert small_classifier.hash().startswith("RC-")


def test_build_range_table_fills_gaps_and_merges():
    ranges = [(0x00, 0x1F, "a"), (0x20, 0x2F, "a"), (0x40, 0x4F, "b"), (0x60, 0x6F, "b")]
    boundaries, labels = build_range_table(ranges, gap=None)
    assert boundaries == [0x00, 0x30, 0x40, 0x50, 0x60, 0x70]
    assert labels == ["a", None, "b", None, "b", None]


def test_build_range_table_gap_label_merges_with_explicit_gap():
    boundaries, labels = build_range_table([(0x10, 0x1F, "x"), (0x20, MAX_CODE_POINT, "?")], gap="?")
    assert boundaries == [0, 0x10, 0x20]
    assert labels == ["?", "x", "?"]
    boundaries, labels = build_range_table([], gap="?")
    assert (boundaries, labels) == ([0], ["?"])


def test_build_range_table_overlap():
    with pytest.raises(ValueError):
        build_range_table([(0x00, 0x20, "a"), (0x20, 0x30, "b")], gap=None)


def test_read_range_file(tmp_path):
    path = tmp_path / "ranges.txt"
    path.write_text(
        "# header comment\n"
        "\n"
        "0100..017F; Latin Extended-A\n"
        "0000..007F ; Basic Latin  # trailing comment\n"
        "00B5       ; Micro\n",
        encoding="utf-8",
    )
    assert read_range_file(str(path)) == [
        (0x0000, 0x007F, "Basic Latin"),
        (0x00B5, 0x00B5, "Micro"),
        (0x0100, 0x017F, "Latin Extended-A"),
    ]


@pytest.mark.parametrize(
    "line", ["0000..007F Basic Latin", "XYZ; Bad", "0080..0010; Backwards", "110000; Too big", "0000;"]
)
def test_read_range_file_malformed(tmp_path, line):
    path = tmp_path / "bad.txt"
    path.write_text("0000..0000; Fine\n" + line + "\n", encoding="utf-8")
    with pytest.raises(ValueError, match=r"bad.txt:2"):
        read_range_file(str(path))


@pytest.mark.parametrize(
    "display_name, identifier",
    [
        ("Basic Latin", "BASIC_LATIN"),
        ("Latin-1 Supplement", "LATIN_1_SUPPLEMENT"),
        ("Supplementary Private Use Area-B", "SUPPLEMENTARY_PRIVATE_USE_AREA_B"),
        ("Phags-pa", "PHAGS_PA"),
        ("Old_Italic", "OLD_ITALIC"),
    ],
)
def test_label_identifier(display_name, identifier):
    assert label_identifier(display_name) == identifier


def test_overlay(small_classifier):
    top = RangeClassifier([0, 0x41, 0x5B, 0x200], [None, "upper", None, "cut"])
    combined = small_classifier.overlay(top)
    assert list(combined.ranges()) == [
        (0, 0x40, "ascii"),
        (0x41, 0x5A, "upper"),
        (0x5B, 0x7F, "ascii"),
        (0x80, 0xFF, "latin1"),
        (0x100, 0x1FF, None),
        (0x200, MAX_CODE_POINT, "cut"),
    ]
    for scalar in list(combined.boundaries) + [0x40, 0x5A, 0xFFFF]:
        expected = top.classify(scalar)
        if expected is None:
            expected = small_classifier.classify(scalar)
        assert combined.classify(scalar) == expected


def test_overlay_merges_equal_neighbours(small_classifier):
    combined = small_classifier.overlay(RangeClassifier([0, 0x80], [None, "ascii"]))
    assert list(combined.ranges()) == [(0, MAX_CODE_POINT, "ascii")]
