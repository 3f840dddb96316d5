from __future__ import annotations

from zonegen.ir import Timezone, ZoneRec, build_mappings


def _zone(name: str, offset: int) -> Timezone:
    return Timezone(name=name, last_zone_rec=ZoneRec(offset, f"{offset} - X"))


def test_offsets_are_ascending_and_aliases_follow_their_zone() -> None:
    zones = [_zone("UTC", 0), _zone("Asia/Kolkata", 19800), _zone("America/New_York", -18000), _zone("Africa/Abidjan", 0)]
    aliases = {"Etc/UTC": "UTC", "US/Eastern": "America/New_York", "Orphan": "Not/Loaded"}

    mappings = build_mappings(zones, aliases)

    assert mappings.raw_offsets_index == [-18000, 0, 19800]
    assert mappings.raw_offsets_index_table == [
        {"America/New_York", "US/Eastern"},
        {"UTC", "Africa/Abidjan", "Etc/UTC"},
        {"Asia/Kolkata"},
    ]
    assert mappings.aliases == aliases


def test_empty_input_builds_empty_index() -> None:
    mappings = build_mappings([], {})

    assert mappings.raw_offsets_index == []
    assert mappings.raw_offsets_index_table == []
