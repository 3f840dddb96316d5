"""Top-level entry point: load_zoneinfo."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from ..errors import LoadError
from ..ir import Timezone
from .model import ZoneInfoIndex
from .records import require_encodable, timezone_from_payload

logger = logging.getLogger(__name__)


def _input_files(input_path: Path) -> list[Path]:
    if input_path.is_dir():
        files = sorted(input_path.rglob("*.json"))
        if not files:
            raise LoadError(f"No .json zone record files found in {input_path}")
        return files
    if input_path.is_file():
        return [input_path]
    raise LoadError(f"Input path {input_path} does not exist")


def _read_payload(file_path: Path) -> dict:
    try:
        payload = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise LoadError(f"{file_path}: invalid JSON ({exc})") from exc
    except OSError as exc:
        raise LoadError(f"{file_path}: cannot read ({exc})") from exc
    if not isinstance(payload, dict):
        raise LoadError(f"{file_path}: top level must be a JSON object")
    return payload


def read_target_zone_list(path: Path) -> set[str]:
    """Read a newline-separated list of zone names; '#' starts a comment."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LoadError(f"{path}: cannot read target zone list ({exc})") from exc
    names: set[str] = set()
    for line in text.splitlines():
        name = line.split("#", 1)[0].strip()
        if name:
            names.add(name)
    return names


def load_zoneinfo(input_path: Path, target_zones: Iterable[str] | None = None) -> ZoneInfoIndex:
    """Load every zone record file under input_path into a ZoneInfoIndex.

    target_zones, when given, replaces any 'target_zones' lists found in the
    input files. Otherwise the union of those lists is used, and when no file
    carries one every zone is a target.
    """
    files = _input_files(input_path)

    timezones: list[Timezone] = []
    by_name: dict[str, Timezone] = {}
    declared_zones: dict[str, list[Path]] = {}
    aliases: dict[str, str] = {}
    alias_declarations: dict[str, list[tuple[str, Path]]] = {}
    listed_targets: set[str] | None = None

    for file_path in files:
        payload = _read_payload(file_path)

        raw_zones = payload.get("zones", [])
        if not isinstance(raw_zones, list):
            raise LoadError(f"{file_path}: 'zones' must be a list")
        for position, raw_zone in enumerate(raw_zones):
            zone = timezone_from_payload(raw_zone, f"{file_path}: zone {position}")
            timezones.append(zone)
            by_name[zone.name] = zone
            declared_zones.setdefault(zone.name, []).append(file_path)

        raw_aliases = payload.get("aliases", {})
        if not isinstance(raw_aliases, dict):
            raise LoadError(f"{file_path}: 'aliases' must be an object")
        for alias, real_name in raw_aliases.items():
            if not isinstance(real_name, str) or not real_name.strip():
                raise LoadError(f"{file_path}: alias '{alias}' must name a zone")
            require_encodable(alias, f"alias {alias!r}", str(file_path))
            require_encodable(real_name, f"target of alias {alias!r}", str(file_path))
            aliases[alias] = real_name.strip()
            alias_declarations.setdefault(alias, []).append((real_name.strip(), file_path))

        raw_targets = payload.get("target_zones")
        if raw_targets is not None:
            if not isinstance(raw_targets, list) or not all(isinstance(n, str) for n in raw_targets):
                raise LoadError(f"{file_path}: 'target_zones' must be a list of names")
            listed_targets = (listed_targets or set()) | set(raw_targets)

        logger.info("Loaded %s (%d zones, %d aliases)", file_path, len(raw_zones), len(raw_aliases))

    return ZoneInfoIndex(
        files=files,
        timezones=timezones,
        by_name=by_name,
        declared_zones=declared_zones,
        aliases=aliases,
        alias_declarations=alias_declarations,
        target_zones=set(target_zones) if target_zones is not None else listed_targets,
    )
