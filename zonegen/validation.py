from __future__ import annotations

import logging

from .errors import ValidationError
from .loading import ZoneInfoIndex

logger = logging.getLogger(__name__)


def validate_zoneinfo_index(index: ZoneInfoIndex) -> None:
    duplicate_zones = {
        name: paths
        for name, paths in index.declared_zones.items()
        if len(paths) > 1
    }
    if duplicate_zones:
        lines = []
        for name in sorted(duplicate_zones):
            joined = ", ".join(str(path) for path in duplicate_zones[name])
            lines.append(f"{name}: {joined}")
        message = "Duplicate zone names found:\n" + "\n".join(lines)
        raise ValidationError(message)

    unresolved: list[str] = []

    for alias in sorted(index.alias_declarations):
        targets = {target for target, _ in index.alias_declarations[alias]}
        if len(targets) > 1:
            unresolved.append(
                f"{alias}: conflicting alias targets {', '.join(sorted(targets))}"
            )

    for alias, real_name in sorted(index.aliases.items()):
        if alias == real_name:
            unresolved.append(f"{alias}: alias refers to itself")
        elif alias in index.by_name:
            unresolved.append(f"{alias}: alias shadows a zone of the same name")
        elif real_name in index.aliases:
            unresolved.append(f"{alias}: alias target '{real_name}' is itself an alias")
        elif real_name not in index.by_name:
            unresolved.append(f"{alias}: alias target '{real_name}' is not a known zone")

    if unresolved:
        raise ValidationError("Validation failed:\n" + "\n".join(unresolved))

    if index.target_zones is not None:
        known = set(index.by_name) | set(index.aliases)
        for name in sorted(index.target_zones - known):
            logger.warning("Target zone '%s' does not appear in the input records", name)
        for alias in sorted(index.target_zones & set(index.aliases)):
            real_name = index.aliases[alias]
            if real_name not in index.target_zones:
                logger.warning(
                    "Target alias '%s' will not be generated: its zone '%s' is not a target zone",
                    alias,
                    real_name,
                )
