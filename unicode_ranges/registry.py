import types
from typing import Any, Iterable

import regex as re

from unicode_ranges.classify.labels import Block, Script
from unicode_ranges.classify.ranges import ALIASES_PATH, RangeLabel
from unicode_ranges.errors import UnknownName
from unicode_ranges.utils import build_once, create_logger

logger = create_logger("registry", verbose=False)

LOOSE_MATCH_IGNORED = re.compile(r"[\s_\-]+")


def normalize_name(name: str) -> str:
    """Loose matching key: 'Basic_Latin', 'basic latin' and 'BASICLATIN' all give 'BASICLATIN'."""
    return LOOSE_MATCH_IGNORED.sub("", name.upper())


class NameRegistry:
    """Loose-matched name -> label lookup. Filled with register(), then frozen."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._entries: dict[str, Any] = {}
        self._frozen = False

    def register(self, name: str, label: Any) -> None:
        if self._frozen:
            raise RuntimeError(f"{self.kind} registry is frozen, cannot register {name!r}")
        key = normalize_name(name)
        existing = self._entries.get(key)
        if existing is not None and existing != label:
            raise ValueError(f"{self.kind} name {name!r} already registered for {existing}")
        self._entries[key] = label

    def register_label(self, label: RangeLabel) -> None:
        self.register(label.display_name, label)
        self.register(label.identifier, label)

    def freeze(self) -> "NameRegistry":
        self._frozen = True
        self._entries = types.MappingProxyType(self._entries)  # type: ignore[assignment]
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, name: str) -> Any:
        try:
            return self._entries[normalize_name(name)]
        except KeyError:
            raise UnknownName(name, self.kind) from None

    def get(self, name: str, default: Any = None) -> Any:
        return self._entries.get(normalize_name(name), default)

    def names(self) -> list[str]:
        """Normalized keys, sorted."""
        return sorted(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"NameRegistry({self.kind!r}, {len(self)} names)"


def read_alias_file(filename: str = ALIASES_PATH) -> list[tuple[str, str, str]]:
    """
    Read alias lines of the form 'blk ; Greek ; Greek and Coptic'.

    Returns:
        (property, alias, canonical name) triples in file order.
    """
    aliases = []
    with open(filename, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.split("#", 1)[0].strip()
            if not line:
                continue
            fields = [field.strip() for field in line.split(";")]
            if len(fields) != 3 or not all(fields):
                raise ValueError(f"{filename}:{line_no}: expected '<property> ; <alias> ; <name>', got {line!r}")
            aliases.append((fields[0], fields[1], fields[2]))
    return aliases


def build_registry(kind: str, label_type: type, prop: str, aliases: Iterable[tuple[str, str, str]]) -> NameRegistry:
    registry = NameRegistry(kind)
    for label in label_type:
        registry.register_label(label)
    n_aliases = 0
    for alias_prop, alias, canonical in aliases:
        if alias_prop != prop:
            continue
        registry.register(alias, label_type(canonical))
        n_aliases += 1
    logger.debug(f"Built {kind} registry: {len(label_type)} labels, {n_aliases} aliases, {len(registry)} keys")
    return registry.freeze()


@build_once
def block_registry() -> NameRegistry:
    return build_registry("block", Block, "blk", read_alias_file(ALIASES_PATH))


@build_once
def script_registry() -> NameRegistry:
    return build_registry("script", Script, "sc", read_alias_file(ALIASES_PATH))


def block_by_name(name: str) -> Block:
    """
    Block for a canonical name, identifier or alias, matched loosely.
    Raises:
        UnknownName: if nothing matches.
    """
    return block_registry().lookup(name)


def script_by_name(name: str) -> Script:
    return script_registry().lookup(name)
