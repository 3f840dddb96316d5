"""Offset index shared by every backend: distinct raw offsets and the names using them."""
from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from .records import Timezone


@dataclass(slots=True)
class Mappings:
    aliases: dict[str, str] = field(default_factory=dict)
    raw_offsets_index: list[int] = field(default_factory=list)
    raw_offsets_index_table: list[set[str]] = field(default_factory=list)

    def add(self, zone: Timezone) -> None:
        """Register a canonical zone under its raw offset, keeping offsets ascending."""
        index = bisect_left(self.raw_offsets_index, zone.raw_offset)
        if index == len(self.raw_offsets_index) or self.raw_offsets_index[index] != zone.raw_offset:
            self.raw_offsets_index.insert(index, zone.raw_offset)
            self.raw_offsets_index_table.insert(index, set())
        self.raw_offsets_index_table[index].add(zone.name)

    def resolve(self) -> None:
        """Put each alias into the offset set that holds its canonical zone.

        Aliases whose canonical zone was never added are left out.
        """
        for alias, real_name in sorted(self.aliases.items()):
            for names in self.raw_offsets_index_table:
                if real_name in names:
                    names.add(alias)
                    break


def build_mappings(timezones: Iterable[Timezone], aliases: Mapping[str, str]) -> Mappings:
    mappings = Mappings(aliases=dict(aliases))
    for zone in timezones:
        mappings.add(zone)
    mappings.resolve()
    return mappings
