from __future__ import annotations

import json
from pathlib import Path

import pytest

from zonegen.__main__ import _backend_options, main
from zonegen.errors import GenerationError

FIXTURE = Path(__file__).resolve().parent / "data" / "zoneinfo.json"


def test_list_backends(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--list-backends"]) == 0

    out = capsys.readouterr().out
    assert "Available backends:" in out
    assert "  - simple" in out


def test_generation_writes_table_and_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    targets = tmp_path / "targets.txt"
    targets.write_text("America/New_York\nUS/Eastern\n", encoding="utf-8")
    out_dir = tmp_path / "out"

    status = main(
        [
            "--backend", "simple",
            "--input", str(FIXTURE),
            "--out", str(out_dir),
            "--target-zones", str(targets),
            "--option", "output_file=Eastern.java",
        ]
    )

    assert status == 0
    assert (out_dir / "Eastern.java").is_file()
    report = json.loads((out_dir / "generation-report.json").read_text(encoding="utf-8"))
    assert report["backend"] == "simple"
    assert report["zones_emitted"] == ["America/New_York", "US/Eastern"]
    assert report["aliases_emitted"] == ["US/Eastern"]
    assert report["artifacts"] == [str(out_dir / "Eastern.java")]
    assert "Generated 1 file(s)" in capsys.readouterr().out


def test_generation_failure_returns_one(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    status = main(["--backend", "simple", "--input", str(tmp_path / "missing.json"), "--out", str(tmp_path)])

    assert status == 1
    assert "Generation failed:" in capsys.readouterr().err


def test_backend_is_required() -> None:
    with pytest.raises(SystemExit):
        main(["--input", str(FIXTURE), "--out", "unused"])


def test_option_overrides_config_without_coercion(tmp_path: Path) -> None:
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"output_file": "A.java"}), encoding="utf-8")

    options = _backend_options(str(config), ["output_file = 2024.java"])

    assert options == {"output_file": "2024.java"}


def test_malformed_option_items_are_rejected() -> None:
    with pytest.raises(GenerationError, match="Expected KEY=VALUE"):
        _backend_options(None, ["no-equals"])
    with pytest.raises(GenerationError, match="Expected KEY=VALUE"):
        _backend_options(None, ["=value"])


def test_unknown_option_fails_the_run(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    status = main(
        ["--backend", "simple", "--input", str(FIXTURE), "--out", str(tmp_path), "--option", "indent=4"]
    )

    assert status == 1
    assert "unknown option 'indent'" in capsys.readouterr().err
