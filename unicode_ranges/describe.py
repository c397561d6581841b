import argparse

import tabulate

from unicode_ranges.classify.tables import block_classifier, script_classifier
from unicode_ranges.classify.tables import logger as tables_logger
from unicode_ranges.codec.codepoints import encode, is_valid_scalar
from unicode_ranges.codec.scanner import iter_scalars, to_code_units
from unicode_ranges.errors import InvalidCodePoint, UnknownName
from unicode_ranges.registry import block_by_name, script_by_name
from unicode_ranges.registry import logger as registry_logger
from unicode_ranges.utils import create_logger, format_code_point, set_verbose

logger = create_logger("describe")

NO_BLOCK = "(none)"


def parse_code_point(text: str) -> int:
    """'U+1F600', '0x1f600' or '1F600' -> 0x1F600"""
    digits = text.strip()
    for prefix in ("U+", "u+", "0x", "0X"):
        if digits.startswith(prefix):
            digits = digits[len(prefix) :]
            break
    try:
        value = int(digits, 16)
    except ValueError:
        raise InvalidCodePoint(text, f"Invalid code point: {text!r} is not a hex number") from None
    if not is_valid_scalar(value):
        raise InvalidCodePoint(value)
    return value


def describe_scalars(scalars: list[int]) -> list[dict]:
    blocks = block_classifier().classify_many(scalars)
    scripts = script_classifier().classify_many(scalars)
    rows = []
    for value, block, script in zip(scalars, blocks, scripts):
        char = chr(value)
        rows.append(
            {
                "code point": format_code_point(value),
                "char": char if char.isprintable() else "",
                "utf-16": " ".join(f"{unit:04X}" for unit in encode(value)),
                "block": str(block) if block is not None else NO_BLOCK,
                "script": str(script),
            }
        )
    return rows


def describe_ranges(classifier, label) -> list[dict]:
    return [
        {"start": format_code_point(start), "end": format_code_point(end), "size": end - start + 1}
        for start, end in classifier.ranges_of(label)
    ]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Show the UTF-16 units, block and script of each character.")
    parser.add_argument("text", nargs="*", help="Text to describe, or hex code points with --codepoints")
    parser.add_argument("--codepoints", "-c", action="store_true", help="Treat arguments as hex code points")
    parser.add_argument("--block", type=str, help="List the ranges of a block, by name or alias")
    parser.add_argument("--script", type=str, help="List the ranges of a script, by name or alias")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log table construction")
    args = parser.parse_args(argv)

    for lg in (logger, tables_logger, registry_logger):
        set_verbose(lg, args.verbose)

    if not (args.text or args.block or args.script):
        parser.error("nothing to describe: give TEXT, --block or --script")

    try:
        if args.block:
            block = block_by_name(args.block)
            rows = describe_ranges(block_classifier(), block)
            logger.info(f"Block {block.display_name} ({block.identifier})")
            print(tabulate.tabulate(rows, headers="keys", tablefmt="github"))
        if args.script:
            script = script_by_name(args.script)
            rows = describe_ranges(script_classifier(), script)
            logger.info(f"Script {script.display_name}: {len(rows)} ranges")
            print(tabulate.tabulate(rows, headers="keys", tablefmt="github"))
        if args.text:
            if args.codepoints:
                scalars = [parse_code_point(arg) for arg in args.text]
            else:
                scalars = list(iter_scalars(to_code_units(" ".join(args.text))))
            print(tabulate.tabulate(describe_scalars(scalars), headers="keys", tablefmt="github"))
    except (InvalidCodePoint, UnknownName) as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
