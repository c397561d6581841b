"""Regenerate labels.py from the packaged block and script range files."""

import argparse
import os

from unicode_ranges.classify.ranges import BLOCKS_PATH, DATA_DIR, SCRIPTS_PATH, label_identifier, read_range_file
from unicode_ranges.utils import create_logger

LABELS_PATH = os.path.join(DATA_DIR, "labels.py")
UNKNOWN_SCRIPT = "Unknown"

HEADER = """\
# Generated by unicode_ranges.classify.gen_labels from unicode_blocks.txt and unicode_scripts.txt.
# Do not edit by hand, rerun: python -m unicode_ranges.classify.gen_labels

from unicode_ranges.classify.ranges import RangeLabel
"""


def unique_names(filename: str) -> list[str]:
    """Range names in order of first appearance."""
    names: dict[str, None] = {}
    for _, _, name in read_range_file(filename):
        names.setdefault(name, None)
    return list(names)


def render_enum(class_name: str, doc: str, names: list[str]) -> str:
    lines = ["", "", f"class {class_name}(RangeLabel):", f'    """{doc}"""', ""]
    seen = set()
    for name in names:
        identifier = label_identifier(name)
        if identifier in seen:
            raise ValueError(f"{class_name}: identifier {identifier} used by more than one name")
        seen.add(identifier)
        lines.append(f'    {identifier} = "{name}"')
    return "\n".join(lines) + "\n"


def render_labels(blocks_path: str = BLOCKS_PATH, scripts_path: str = SCRIPTS_PATH) -> str:
    block_names = unique_names(blocks_path)
    script_names = unique_names(scripts_path)
    if UNKNOWN_SCRIPT not in script_names:
        script_names.append(UNKNOWN_SCRIPT)
    return (
        HEADER
        + render_enum("Block", "Unicode character blocks, in code point order.", block_names)
        + render_enum("Script", "Unicode scripts, in order of first appearance.", script_names)
    )


def main():
    parser = argparse.ArgumentParser(description="Regenerate the Block and Script enums")
    parser.add_argument("--blocks", type=str, default=BLOCKS_PATH, help="Block range file")
    parser.add_argument("--scripts", type=str, default=SCRIPTS_PATH, help="Script range file")
    parser.add_argument("--output", type=str, default=LABELS_PATH, help="Where to write the module")
    args = parser.parse_args()

    logger = create_logger("gen_labels")
    source = render_labels(args.blocks, args.scripts)
    with open(args.output, "w", encoding="utf-8") as f:
        f.write(source)
    logger.info(f"Wrote {source.count(' = ')} labels to {args.output}")


if __name__ == "__main__":
    main()
