from .labels import Block, Script
from .ranges import RangeClassifier, RangeLabel, build_range_table, label_identifier, read_range_file
from .tables import (
    block_classifier,
    classify_block,
    classify_block_unit,
    classify_script,
    classify_script_unit,
    script_classifier,
)
