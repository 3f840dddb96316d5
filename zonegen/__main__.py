from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .engine import RunResult, run_generation
from .errors import GenerationError
from .loading import read_target_zone_list
from .targets import backend_names


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m zonegen",
        description="Generate timezone source tables from parsed zone records.",
    )
    parser.add_argument("--backend", required=False, help="Output backend (e.g. simple).")
    parser.add_argument("--input", help="Zone record JSON file, or a directory of them.")
    parser.add_argument("--out", help="Output directory for generated files.")
    parser.add_argument(
        "--target-zones",
        metavar="FILE",
        help="File listing the zone names to generate, one per line.",
    )
    parser.add_argument(
        "--report",
        default="generation-report.json",
        help="Report file name (written under --out).",
    )
    parser.add_argument(
        "--list-backends",
        action="store_true",
        help="List available output backends and exit.",
    )
    parser.add_argument(
        "--config",
        help="JSON object of backend options, e.g. {\"output_file\": \"Zones.java\"}.",
    )
    parser.add_argument(
        "--option",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Set a string backend option, overriding --config (may be repeated).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress at INFO level.")
    return parser.parse_args(argv)


def _backend_options(config_path: str | None, items: list[str]) -> dict[str, object]:
    """Merge --config and --option values; the engine checks them against the backend."""
    options: dict[str, object] = {}

    if config_path:
        config_file = Path(config_path)
        try:
            payload = json.loads(config_file.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise GenerationError(f"Cannot read config file {config_file}: {exc}") from exc
        if not isinstance(payload, dict):
            raise GenerationError(f"Config file {config_file} must contain a JSON object.")
        options.update(payload)

    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise GenerationError(f"Invalid --option value '{item}'. Expected KEY=VALUE.")
        options[key.strip()] = value.strip()

    return options


def _build_report(backend: str, result: RunResult) -> dict:
    emitted: list[str] = []
    aliases: list[str] = []
    skipped: list[str] = []
    unmerged: list[int] = []
    for artifact in result.artifacts:
        emitted.extend(artifact.summary.get("zones", []))
        aliases.extend(artifact.summary.get("aliases", []))
        skipped.extend(artifact.summary.get("skipped_aliases", []))
        unmerged.extend(artifact.summary.get("unmerged_offsets", []))
    return {
        "backend": backend,
        "input_files": [str(path) for path in result.zoneinfo.files],
        "zones_emitted": emitted,
        "aliases_emitted": aliases,
        "aliases_skipped": skipped,
        "unmerged_offsets": unmerged,
        "artifacts": [str(artifact.path) for artifact in result.artifacts],
    }


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_backends:
        print("Available backends:")
        for name in backend_names():
            print(f"  - {name}")
        return 0

    if not args.backend:
        raise SystemExit("Error: --backend is required unless --list-backends is used.")
    if not args.input or not args.out:
        raise SystemExit("Error: --input and --out are required for generation.")

    try:
        extra = _backend_options(args.config, args.option)
        target_zones = (
            read_target_zone_list(Path(args.target_zones)) if args.target_zones else None
        )
        result = run_generation(
            backend_name=args.backend,
            input_path=Path(args.input),
            output_dir=Path(args.out),
            target_zones=target_zones,
            extra=extra,
        )
    except GenerationError as exc:
        print(f"Generation failed: {exc}", file=sys.stderr)
        return 1

    report_path = Path(args.out) / args.report
    report_path.write_text(json.dumps(_build_report(args.backend, result), indent=2), encoding="utf-8")

    print(f"Generated {len(result.artifacts)} file(s) to {Path(args.out)}")
    print(f"Wrote generation report: {report_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
