class UnicodeRangesError(Exception):
    """Base class for errors raised by unicode_ranges."""


class InvalidCodePoint(UnicodeRangesError, ValueError):
    """A value outside [0, 0x10FFFF] was given where a scalar value is required."""

    def __init__(self, value, message: str | None = None) -> None:
        self.value = value
        if message is None:
            message = f"Invalid code point: {value!r} is not in [0x0, 0x10FFFF]"
        super().__init__(message)


class IndexOutOfRange(UnicodeRangesError, IndexError):
    """An index or sub-range lies outside a sequence, or an offset runs past its bounds."""


class UnknownName(UnicodeRangesError, KeyError):
    """A registry lookup matched no canonical name or alias."""

    def __init__(self, name: str, kind: str) -> None:
        self.name = name
        self.kind = kind
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown {self.kind} name: {self.name!r}"
