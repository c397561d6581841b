from .classify import (
    Block,
    RangeClassifier,
    RangeLabel,
    Script,
    block_classifier,
    classify_block,
    classify_block_unit,
    classify_script,
    classify_script_unit,
    script_classifier,
)
from .codec import (
    MAX_BMP_CODE_POINT,
    MAX_CODE_POINT,
    MAX_CODE_UNIT,
    MAX_HIGH_SURROGATE,
    MAX_LOW_SURROGATE,
    MAX_SURROGATE,
    MIN_CODE_POINT,
    MIN_HIGH_SURROGATE,
    MIN_LOW_SURROGATE,
    MIN_SUPPLEMENTARY_CODE_POINT,
    MIN_SURROGATE,
    compose,
    count_scalars,
    decompose,
    encode,
    encode_into,
    from_code_units,
    high_surrogate,
    is_bmp,
    is_high_surrogate,
    is_low_surrogate,
    is_supplementary,
    is_surrogate,
    is_surrogate_pair,
    is_valid_scalar,
    iter_scalars,
    low_surrogate,
    offset_by_scalars,
    scalar_at,
    scalar_before,
    to_code_units,
    units_needed,
)
from .errors import IndexOutOfRange, InvalidCodePoint, UnicodeRangesError, UnknownName
from .registry import NameRegistry, block_by_name, block_registry, normalize_name, script_by_name, script_registry
