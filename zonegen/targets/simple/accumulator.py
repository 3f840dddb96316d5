"""Per-run state of the simple backend: zone bookkeeping and table emission."""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Callable, Mapping, Sequence

from ...ir import RuleRec, Timezone, ZoneRec
from .formatting import format_footer, format_header, format_zone_record

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EmissionSummary:
    zones: list[str] = field(default_factory=list)
    aliases: list[str] = field(default_factory=list)
    skipped_aliases: list[str] = field(default_factory=list)
    unmerged_offsets: list[int] = field(default_factory=list)

    def as_dict(self) -> dict[str, list]:
        return asdict(self)


def _accept_all(name: str) -> bool:
    return True


class SimpleAccumulator:
    """Collects the final state of each zone, then writes the SimpleTimeZone table.

    Build one per generation run: call record_zone() for every zone, then
    emit() once.
    """

    def __init__(self) -> None:
        self.last_zone_recs: dict[str, ZoneRec] = {}
        self.last_rules: dict[str, tuple[RuleRec, RuleRec] | None] = {}
        # Zones whose raw offset changes in the future are grouped under
        # their last known offset.
        self.zones_by_offset: dict[int, set[str]] = {}
        self._offsets: dict[str, int] = {}
        self.summary = EmissionSummary()

    def record_zone(self, zone: Timezone) -> int:
        """Store zone's last rules and zone record, replacing earlier ones. Always 0."""
        name = zone.name
        self.last_rules[name] = zone.last_rules
        self.last_zone_recs[name] = zone.last_zone_rec

        previous = self._offsets.get(name)
        if previous is not None and previous != zone.raw_offset:
            group = self.zones_by_offset[previous]
            group.discard(name)
            if not group:
                del self.zones_by_offset[previous]
        self._offsets[name] = zone.raw_offset
        self.zones_by_offset.setdefault(zone.raw_offset, set()).add(name)
        return 0

    def offset_groups(self) -> list[tuple[int, list[str]]]:
        return [(offset, sorted(self.zones_by_offset[offset])) for offset in sorted(self.zones_by_offset)]

    def emit(
        self,
        offset_index: Sequence[int],
        alias_index_for_offset: Sequence[set[str]],
        aliases: Mapping[str, str],
        output_path: Path,
        *,
        panic: Callable[[str], None],
        is_target_zone: Callable[[str], bool] = _accept_all,
    ) -> int:
        """Write the zone table to output_path.

        offset_index and alias_index_for_offset are positional: the i-th offset
        group is merged with alias_index_for_offset[i] only when its offset
        equals offset_index[i]. Returns 0, or 1 after reporting an I/O failure
        through panic.
        """
        self.summary = EmissionSummary()
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with output_path.open("w", encoding="utf-8") as out:
                out.write("\n".join(format_header()) + "\n")
                for index, (offset, names) in enumerate(self.offset_groups()):
                    group = set(names)
                    if offset == offset_index[index]:
                        group |= alias_index_for_offset[index]
                    else:
                        logger.warning(
                            "Offset group %d (%d) does not match offset index entry %d; aliases not merged",
                            index,
                            offset,
                            offset_index[index],
                        )
                        self.summary.unmerged_offsets.append(offset)

                    for name in sorted(group):
                        real_name = aliases.get(name)
                        if real_name is not None:
                            if not is_target_zone(name):
                                self.summary.skipped_aliases.append(name)
                                continue
                            rules = self.last_rules.get(real_name)
                            zone_rec = self.last_zone_recs[real_name]
                            self.summary.aliases.append(name)
                        else:
                            rules = self.last_rules.get(name)
                            zone_rec = self.last_zone_recs[name]
                        self.summary.zones.append(name)

                        lines = format_zone_record(name, offset, zone_rec, rules, alias_target=real_name)
                        out.write("\n".join(lines) + "\n")
                out.write("\n".join(format_footer()) + "\n")
        except OSError as exc:
            panic(f"IO error: {exc}")
            return 1

        logger.info("Created %s (%d zones)", output_path, len(self.summary.zones))
        return 0
