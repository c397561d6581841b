from .codepoints import (
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
from .scanner import (
    count_scalars,
    from_code_units,
    iter_scalars,
    offset_by_scalars,
    scalar_at,
    scalar_before,
    to_code_units,
)
