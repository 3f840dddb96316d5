from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .diagnostics import Diagnostics
from .ir import Mappings
from .loading import ZoneInfoIndex


@dataclass(slots=True)
class GenerationOptions:
    input_path: Path
    output_dir: Path
    extra: dict[str, Any] = field(default_factory=dict)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass(slots=True)
class GeneratedArtifact:
    path: Path
    artifact_type: str
    summary: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class BackendResult:
    status: int
    artifacts: list[GeneratedArtifact] = field(default_factory=list)


class GeneratorBackend(ABC):
    """Base contract for output backends (simple table, binary files, etc.)."""

    name: str
    # Options a backend accepts through GenerationOptions.extra, with their types.
    option_types: dict[str, type] = {}

    @abstractmethod
    def generate(
        self,
        zoneinfo: ZoneInfoIndex,
        mappings: Mappings,
        options: GenerationOptions,
    ) -> BackendResult:
        """Generate output for the target zones of zoneinfo.

        A non-zero status means a fatal diagnostic was reported through
        options.diagnostics.
        """
