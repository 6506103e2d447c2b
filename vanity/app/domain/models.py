"""Domain models."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping


@dataclass(frozen=True)
class MetadataRecord:
    """One configured package (or package-path pattern) and where it lives."""

    pkg: str
    vcs: str
    repo: str
    pattern: str = ""
    source: str = ""
    source_dir: str = ""
    source_line: str = ""
    doc: str = ""
    body: str = ""
    matcher: re.Pattern[str] | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.matcher is not None and self.matcher.pattern != self.pattern:
            raise ValueError("matcher must be compiled from pattern")

    def matches(self, package_path: str) -> bool:
        """True if the compiled pattern finds a match anywhere in package_path."""
        if self.matcher is None:
            return False
        return self.matcher.search(package_path) is not None


@dataclass(frozen=True)
class MetadataTable:
    """
    Immutable snapshot of all active metadata records.

    `records` maps package path to record. `patterned` holds the records that
    carry a compiled pattern, in the order their keys were first seen in the
    configuration file; pattern fallback scans them in that order.
    """

    records: Mapping[str, MetadataRecord]
    patterned: tuple[MetadataRecord, ...] = ()

    @staticmethod
    def from_records(records: Iterable[MetadataRecord]) -> "MetadataTable":
        # Later records overwrite earlier ones with the same key.
        by_pkg: dict[str, MetadataRecord] = {}
        for record in records:
            by_pkg[record.pkg] = record
        patterned = tuple(r for r in by_pkg.values() if r.matcher is not None)
        return MetadataTable(records=MappingProxyType(by_pkg), patterned=patterned)

    def lookup(self, package_path: str) -> MetadataRecord | None:
        return lookup(self, package_path)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[MetadataRecord]:
        return iter(self.records.values())


EMPTY_TABLE = MetadataTable(records=MappingProxyType({}))


def lookup(table: MetadataTable, package_path: str) -> MetadataRecord | None:
    """Exact key first, then the first patterned record whose pattern matches. None on miss."""
    record = table.records.get(package_path)
    if record is not None:
        return record
    for candidate in table.patterned:
        if candidate.matches(package_path):
            return candidate
    return None
