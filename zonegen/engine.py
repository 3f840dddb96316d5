from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping

from .base import GeneratedArtifact, GenerationOptions, GeneratorBackend
from .diagnostics import Diagnostics
from .errors import GenerationError
from .ir import Mappings, build_mappings
from .loading import ZoneInfoIndex, load_zoneinfo
from .targets import get_backend
from .validation import validate_zoneinfo_index

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RunResult:
    zoneinfo: ZoneInfoIndex
    mappings: Mappings
    artifacts: list[GeneratedArtifact]


def check_backend_options(backend: GeneratorBackend, extra: Mapping[str, Any]) -> None:
    problems: list[str] = []
    for key, value in sorted(extra.items()):
        expected = backend.option_types.get(key)
        if expected is None:
            supported = ", ".join(sorted(backend.option_types)) or "<none>"
            problems.append(f"unknown option '{key}' (supported: {supported})")
        elif not isinstance(value, expected):
            problems.append(f"option '{key}' must be {expected.__name__}, got {type(value).__name__}")
    if problems:
        raise GenerationError(f"Backend '{backend.name}': " + "; ".join(problems))


def run_generation(
    *,
    backend_name: str,
    input_path: Path,
    output_dir: Path,
    target_zones: Iterable[str] | None = None,
    extra: dict | None = None,
    diagnostics: Diagnostics | None = None,
) -> RunResult:
    try:
        backend = get_backend(backend_name)
    except ValueError as exc:
        raise GenerationError(str(exc)) from exc
    effective_extra = dict(extra or {})
    check_backend_options(backend, effective_extra)

    try:
        zoneinfo = load_zoneinfo(input_path, target_zones=target_zones)
        validate_zoneinfo_index(zoneinfo)
        mappings = build_mappings(zoneinfo.target_timezones(), zoneinfo.aliases)
    except GenerationError:
        raise
    except Exception as exc:  # pragma: no cover - defensive coding
        raise GenerationError(
            f"Failed to prepare generation for backend '{backend_name}' "
            f"from input={input_path} to output_dir={output_dir}"
        ) from exc

    logger.info(
        "Prepared %d target zones in %d offset groups for backend '%s'",
        len(zoneinfo.target_timezones()),
        len(mappings.raw_offsets_index),
        backend.name,
    )

    options = GenerationOptions(
        input_path=input_path,
        output_dir=output_dir,
        extra=effective_extra,
        diagnostics=diagnostics if diagnostics is not None else Diagnostics(),
    )
    try:
        result = backend.generate(zoneinfo, mappings, options)
    except GenerationError:
        raise
    except Exception as exc:
        raise GenerationError(
            f"Backend '{backend.name}' failed while generating output into {output_dir}"
        ) from exc

    if result.status != 0:
        reported = "; ".join(options.diagnostics.fatal_messages) or "no diagnostic reported"
        raise GenerationError(
            f"Backend '{backend.name}' exited with status {result.status}: {reported}"
        )

    return RunResult(zoneinfo=zoneinfo, mappings=mappings, artifacts=result.artifacts)
