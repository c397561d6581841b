from unicode_ranges.classify.labels import Block, Script
from unicode_ranges.classify.ranges import (
    BLOCKS_PATH,
    SCRIPTS_PATH,
    UNASSIGNED_PATH,
    RangeClassifier,
    build_range_table,
    read_range_file,
)
from unicode_ranges.codec.codepoints import MAX_CODE_UNIT
from unicode_ranges.errors import InvalidCodePoint
from unicode_ranges.utils import build_once, create_logger

logger = create_logger("tables", verbose=False)


def load_classifier(filename: str, label_type: type, gap) -> RangeClassifier:
    """Build a classifier from a range file, mapping each range name to its label_type member."""
    ranges = [(start, end, label_type(name)) for start, end, name in read_range_file(filename)]
    boundaries, labels = build_range_table(ranges, gap)
    classifier = RangeClassifier(boundaries, labels)
    logger.debug(f"Loaded {label_type.__name__} table from {filename}: {classifier!r}")
    return classifier


@build_once
def block_classifier() -> RangeClassifier:
    """Scalar value -> Block, or None for values outside every block."""
    return load_classifier(BLOCKS_PATH, Block, None)


def load_unassigned(filename: str = UNASSIGNED_PATH) -> RangeClassifier:
    """Scalar value -> Script.UNKNOWN for unassigned code points, None for assigned ones."""
    ranges = [(start, end, Script.UNKNOWN) for start, end, _ in read_range_file(filename)]
    classifier = RangeClassifier(*build_range_table(ranges, None))
    logger.debug(f"Loaded unassigned code points from {filename}: {classifier!r}")
    return classifier


@build_once
def script_classifier() -> RangeClassifier:
    """Scalar value -> Script, with Script.UNKNOWN for unassigned values."""
    return load_classifier(SCRIPTS_PATH, Script, Script.UNKNOWN).overlay(load_unassigned())


def classify_block(scalar: int) -> Block | None:
    """
    Block containing a scalar value.
    Returns:
        The Block, or None if the value is valid but not part of any block.
    Raises:
        InvalidCodePoint: if the value is outside [0, 0x10FFFF].
    """
    return block_classifier().classify(scalar)


def classify_script(scalar: int) -> Script:
    return script_classifier().classify(scalar)


def _check_unit(unit: int) -> int:
    if not 0 <= unit <= MAX_CODE_UNIT:
        raise InvalidCodePoint(unit, f"Invalid code unit: {unit!r} is not in [0x0, 0xFFFF]")
    return unit


def classify_block_unit(unit: int) -> Block | None:
    """Block of a single code unit. Surrogate units fall in the surrogate blocks."""
    return classify_block(_check_unit(unit))


def classify_script_unit(unit: int) -> Script:
    return classify_script(_check_unit(unit))
