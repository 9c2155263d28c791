from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from ..exceptions import UnknownColorName
from .data import NAMED_COLOR_ROWS
from .entries import NamedColorEntry

FlagCriterion = Union[bool, str, None]


def _flag_text(flag: bool) -> str:
    return "yes" if flag else "no"


def _text_matches(criterion: Optional[str], value: Optional[str]) -> bool:
    if not criterion:
        return True
    return criterion.lower() in (value or "").lower()


def _flag_matches(criterion: FlagCriterion, flag: bool) -> bool:
    if criterion is None or criterion == "":
        return True
    if isinstance(criterion, bool):
        return criterion == flag
    # text form, as typed into a filter box: "y", "yes", "no", ...
    return criterion.lower() in _flag_text(flag)


@dataclass(frozen=True)
class CatalogFilter:
    """
    Predicates over catalog fields, combined with logical AND.

    Text criteria are case-insensitive substring matches. Flag criteria accept
    a bool, or text matched against "yes"/"no". ``None`` or an empty string
    leaves a field unconstrained.
    """

    name: Optional[str] = None
    web_safe: FlagCriterion = None
    basic: FlagCriterion = None
    extended: FlagCriterion = None
    legacy_index: Optional[str] = None
    legacy_name: Optional[str] = None
    legacy_alias: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) in (None, "") for f in fields(self))

    def matches(self, entry: NamedColorEntry) -> bool:
        legacy = entry.legacy
        return (
            _text_matches(self.name, entry.name)
            and _flag_matches(self.web_safe, entry.web_safe)
            and _flag_matches(self.basic, entry.basic)
            and _flag_matches(self.extended, entry.extended)
            and _text_matches(self.legacy_index, legacy.index if legacy else None)
            and _text_matches(self.legacy_name, legacy.name if legacy else None)
            and _text_matches(self.legacy_alias, legacy.alias if legacy else None)
        )


def filter_colors(
    entries: Iterable[NamedColorEntry],
    criteria: Optional[CatalogFilter] = None,
) -> Tuple[NamedColorEntry, ...]:
    """Entries matching ``criteria``, in their original order."""
    if criteria is None or criteria.is_empty:
        return tuple(entries)
    return tuple(entry for entry in entries if criteria.matches(entry))


class NamedColorCatalog:
    """Read-only, ordered collection of named colors."""

    __slots__ = ('_entries', '_by_name')

    def __init__(self, entries: Iterable[NamedColorEntry]):
        self._entries: Tuple[NamedColorEntry, ...] = tuple(entries)
        by_name: Dict[str, NamedColorEntry] = {}
        for entry in self._entries:
            key = entry.name.lower()
            if key in by_name:
                raise ValueError(f"Duplicate color name in catalog: {entry.name!r}")
            by_name[key] = entry
        self._by_name = by_name

    @classmethod
    def from_rows(cls, rows: Iterable[tuple]) -> NamedColorCatalog:
        return cls(NamedColorEntry.from_row(row) for row in rows)

    def all(self) -> Tuple[NamedColorEntry, ...]:
        return self._entries

    def filter(self, criteria: Optional[CatalogFilter] = None, **predicates) -> Tuple[NamedColorEntry, ...]:
        """
        Entries matching a ``CatalogFilter`` or the same predicates given as
        keyword arguments (not both).

        >>> [e.name for e in CATALOG.filter(legacy_alias="aqua")]
        ['Aqua', 'Cyan']
        """
        if criteria is not None and predicates:
            raise TypeError("Pass either a CatalogFilter or keyword predicates, not both")
        if criteria is None:
            criteria = CatalogFilter(**predicates)
        return filter_colors(self._entries, criteria)

    def get(self, name: str) -> NamedColorEntry:
        """Case-insensitive lookup by exact name."""
        try:
            return self._by_name[name.lower()]
        except KeyError:
            raise UnknownColorName(name) from None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._by_name

    def __iter__(self) -> Iterator[NamedColorEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self._entries)} entries)"


CATALOG = NamedColorCatalog.from_rows(NAMED_COLOR_ROWS)
