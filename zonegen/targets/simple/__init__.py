"""Simple backend: the SimpleTimeZone table (TimeZoneData.java).

The table was the internal zone data of java.util.TimeZone before J2SDK 1.3.
Each entry carries a zone's last raw offset and, when it observes daylight
saving time, its last pair of transition rules.
"""
from __future__ import annotations

from pathlib import Path

from ...base import BackendResult, GeneratedArtifact, GenerationOptions, GeneratorBackend
from ...ir import Mappings
from ...loading import ZoneInfoIndex
from .accumulator import SimpleAccumulator

DEFAULT_OUTPUT_FILE = "TimeZoneData.java"


class SimpleGenerator(GeneratorBackend):
    name = "simple"
    option_types = {"output_file": str}

    def generate(
        self,
        zoneinfo: ZoneInfoIndex,
        mappings: Mappings,
        options: GenerationOptions,
    ) -> BackendResult:
        accumulator = SimpleAccumulator()
        for timezone in zoneinfo.target_timezones():
            accumulator.record_zone(timezone)

        output_file = options.extra.get("output_file") or DEFAULT_OUTPUT_FILE
        output_path = Path(options.output_dir) / output_file
        status = accumulator.emit(
            mappings.raw_offsets_index,
            mappings.raw_offsets_index_table,
            mappings.aliases,
            output_path,
            panic=options.diagnostics.panic,
            is_target_zone=zoneinfo.is_target_zone,
        )
        if status != 0:
            return BackendResult(status=status)

        return BackendResult(
            status=0,
            artifacts=[
                GeneratedArtifact(
                    path=output_path,
                    artifact_type="java-source",
                    summary=accumulator.summary.as_dict(),
                )
            ],
        )
