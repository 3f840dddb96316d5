"""Dataclass for the loaded zone index: ZoneInfoIndex."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..ir import Timezone


@dataclass(slots=True)
class ZoneInfoIndex:
    files: list[Path]
    timezones: list[Timezone]
    by_name: dict[str, Timezone]
    declared_zones: dict[str, list[Path]]
    aliases: dict[str, str] = field(default_factory=dict)
    alias_declarations: dict[str, list[tuple[str, Path]]] = field(default_factory=dict)
    target_zones: set[str] | None = None

    def is_target_zone(self, name: str) -> bool:
        """True when no target list was given or the name is on it."""
        return self.target_zones is None or name in self.target_zones

    def target_timezones(self) -> list[Timezone]:
        return [tz for tz in self.timezones if self.is_target_zone(tz.name)]
