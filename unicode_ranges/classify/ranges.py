import hashlib
import os
from enum import Enum
from typing import Any, Hashable, Iterable, Iterator, Sequence

import numpy as np
import regex as re

from unicode_ranges.codec.codepoints import MAX_CODE_POINT, MIN_CODE_POINT, is_valid_scalar
from unicode_ranges.errors import InvalidCodePoint

CodeRange = tuple[int, int]  # inclusive start and end


class RangeLabel(Enum):
    """Base for block and script labels: member name is the identifier, value the display name."""

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def identifier(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.value


def label_identifier(display_name: str) -> str:
    """'Latin-1 Supplement' -> 'LATIN_1_SUPPLEMENT'"""
    return re.sub(r"[\s\-]+", "_", display_name.strip()).upper()


class RangeClassifier:
    """
    Maps every scalar value to the label of the range containing it.
    Entry k covers [boundaries[k], boundaries[k + 1]), the last entry runs to MAX_CODE_POINT.
    """

    def __init__(self, boundaries: Sequence[int], labels: Sequence[Any]) -> None:
        if not boundaries:
            raise ValueError("Range table must have at least one entry")
        if len(boundaries) != len(labels):
            raise ValueError(f"Got {len(boundaries)} boundaries but {len(labels)} labels")
        if boundaries[0] != MIN_CODE_POINT:
            raise ValueError(f"First boundary must be 0, got {boundaries[0]:#x}")
        for prev, cur in zip(boundaries, boundaries[1:]):
            if cur <= prev:
                raise ValueError(f"Boundaries must be strictly increasing: {cur:#x} follows {prev:#x}")
        if boundaries[-1] > MAX_CODE_POINT:
            raise ValueError(f"Boundary {boundaries[-1]:#x} is past the last code point")

        self.boundaries: tuple[int, ...] = tuple(boundaries)
        self.labels: tuple[Any, ...] = tuple(labels)
        self._boundary_array = np.array(self.boundaries, dtype=np.int64)
        self._boundary_array.flags.writeable = False

    def __len__(self) -> int:
        return len(self.boundaries)

    def __repr__(self) -> str:
        return f"RangeClassifier({len(self)} ranges, {self.hash()})"

    def hash(self) -> str:
        hash = hashlib.sha1()
        hash.update(str(self.boundaries).encode("utf-8"))
        hash.update(str([str(label) for label in self.labels]).encode("utf-8"))
        return "RC-" + hash.hexdigest()[:8]

    def index_of(self, scalar: int) -> int:
        """Index of the entry whose range contains scalar."""
        if not is_valid_scalar(scalar):
            raise InvalidCodePoint(scalar)
        boundaries = self.boundaries
        bottom = 0
        top = len(boundaries)
        current = top // 2
        # invariant: top > current >= bottom and scalar >= boundaries[bottom]
        while top - bottom > 1:
            if scalar >= boundaries[current]:
                bottom = current
            else:
                top = current
            current = (top + bottom) // 2
        return current

    def classify(self, scalar: int) -> Any:
        return self.labels[self.index_of(scalar)]

    def classify_many(self, scalars: Iterable[int] | np.ndarray) -> list[Any]:
        """Classify many scalar values at once, vectorized with numpy."""
        if isinstance(scalars, np.ndarray):
            if scalars.size and scalars.dtype.kind not in "iu":
                raise InvalidCodePoint(scalars.flat[0], f"Invalid code points: expected integers, got {scalars.dtype}")
            invalid = (scalars < MIN_CODE_POINT) | (scalars > MAX_CODE_POINT)
            if invalid.any():
                raise InvalidCodePoint(scalars.flat[np.argmax(invalid)].item())
        else:
            scalars = list(scalars)
            for value in scalars:
                if not isinstance(value, (int, np.integer)) or not is_valid_scalar(value):
                    raise InvalidCodePoint(value)
        values = np.asarray(scalars, dtype=np.int64)
        indices = np.searchsorted(self._boundary_array, values, side="right") - 1
        return [self.labels[i] for i in indices.tolist()]

    def ranges(self) -> Iterator[tuple[int, int, Any]]:
        """(start, end, label) for every entry, end inclusive."""
        ends = [b - 1 for b in self.boundaries[1:]] + [MAX_CODE_POINT]
        yield from zip(self.boundaries, ends, self.labels)

    def ranges_of(self, label: Any) -> list[CodeRange]:
        return [(start, end) for start, end, entry_label in self.ranges() if entry_label == label]

    def label_set(self) -> set:
        return set(self.labels)

    def overlay(self, other: "RangeClassifier") -> "RangeClassifier":
        """New classifier taking the label of other wherever it is not None, and of self elsewhere."""
        boundaries: list[int] = []
        labels: list[Any] = []
        for start in sorted(set(self.boundaries) | set(other.boundaries)):
            label = other.classify(start)
            if label is None:
                label = self.classify(start)
            if labels and labels[-1] == label:
                continue
            boundaries.append(start)
            labels.append(label)
        return RangeClassifier(boundaries, labels)


# --- table construction ---


def read_range_file(filename: str) -> list[tuple[int, int, str]]:
    """
    Read a Blocks.txt / Scripts.txt style file.

    Returns:
        Sorted (start, end, name) triples, end inclusive.
    """
    entries = []
    with open(filename, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            # Parse 0000..007F; Basic Latin  # optional comment
            line = line.split("#", 1)[0].strip()
            if not line:
                continue
            range_str, semicol, name = line.partition(";")
            name = name.strip()
            if not semicol or not name:
                raise ValueError(f"{filename}:{line_no}: expected '<range> ; <name>', got {line!r}")
            start_str, _, end_str = range_str.strip().partition("..")
            try:
                start = int(start_str, 16)
                end = int(end_str, 16) if end_str else start
            except ValueError:
                raise ValueError(f"{filename}:{line_no}: invalid code point range {range_str.strip()!r}") from None
            if not (is_valid_scalar(start) and is_valid_scalar(end)) or end < start:
                raise ValueError(f"{filename}:{line_no}: invalid code point range {range_str.strip()!r}")
            entries.append((start, end, name))
    return sorted(entries)


def build_range_table(ranges: Iterable[tuple[int, int, Hashable]], gap: Hashable) -> tuple[list[int], list[Any]]:
    """
    Turn sorted, non-overlapping inclusive ranges into parallel boundary and label lists that
    cover the whole code point space. Holes get the gap label; adjacent entries with equal labels are merged.
    """
    boundaries: list[int] = []
    labels: list[Any] = []

    def add(start: int, label: Any) -> None:
        if labels and labels[-1] == label:
            return  # extends the previous entry
        boundaries.append(start)
        labels.append(label)

    next_start = MIN_CODE_POINT
    for start, end, label in ranges:
        if start < next_start:
            raise ValueError(f"Range {start:04X}..{end:04X} overlaps or precedes the previous range")
        if start > next_start:
            add(next_start, gap)
        add(start, label)
        next_start = end + 1
    if next_start <= MAX_CODE_POINT:
        add(next_start, gap)
    return boundaries, labels


# --- packaged data ---

DATA_DIR = os.path.dirname(os.path.abspath(__file__))
BLOCKS_PATH = os.path.join(DATA_DIR, "unicode_blocks.txt")
SCRIPTS_PATH = os.path.join(DATA_DIR, "unicode_scripts.txt")
ALIASES_PATH = os.path.join(DATA_DIR, "unicode_aliases.txt")
UNASSIGNED_PATH = os.path.join(DATA_DIR, "unicode_unassigned.txt")
