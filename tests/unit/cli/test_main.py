"""Unit tests for the utilicurve command-line interface."""

from __future__ import annotations

from pathlib import Path

import pytest

from utilicurve.cli.main import build_parser, main

pytestmark = pytest.mark.usefixtures("restore_root_logger")


def _run(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, str]:
    code = main(list(argv))
    return code, capsys.readouterr().out


def test_parser_requires_command() -> None:
    """A subcommand is mandatory."""
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_shapes_lists_catalog(capsys: pytest.CaptureFixture[str]) -> None:
    """shapes prints every shape name."""
    code, out = _run(capsys, "shapes")
    assert code == 0
    assert "NormalDistribution" in out
    assert "Bounce" in out


def test_check_valid_line_prints_encoding(capsys: pytest.CaptureFixture[str]) -> None:
    """check echoes the normalized line."""
    code, out = _run(capsys, "check", "Quadratic 0.5 0 0.23 1.3 FLIPX")
    assert code == 0
    assert "Quadratic 0.5 0.0 0.23 1.3 flipx" in out


def test_check_unknown_shape_fails(capsys: pytest.CaptureFixture[str]) -> None:
    """Wrong-case shape is reported with its error kind."""
    code, out = _run(capsys, "check", "linear 0 0 1 1")
    assert code == 1
    assert "unknown_shape" in out


def test_check_invalid_field_names_field(capsys: pytest.CaptureFixture[str]) -> None:
    """Invalid numeric field is named."""
    code, out = _run(capsys, "check", "Linear abc 0 1 1")
    assert code == 1
    assert "invalid_field" in out
    assert "field: x" in out


def test_eval_prints_pairs(capsys: pytest.CaptureFixture[str]) -> None:
    """eval prints one x -> y line per input."""
    code, out = _run(capsys, "eval", "Linear 0 0 1 1", "0.25", "0.5", "2")
    assert code == 0
    assert "0.2500 -> 0.2500" in out
    assert "0.5000 -> 0.5000" in out
    assert "2.0000 -> 1.0000" in out


def test_eval_bad_line_fails(capsys: pytest.CaptureFixture[str]) -> None:
    """eval refuses malformed lines."""
    code, out = _run(capsys, "eval", "Linear 0 0", "0.5")
    assert code == 1
    assert "insufficient_tokens" in out


def test_sample_prints_table(capsys: pytest.CaptureFixture[str]) -> None:
    """sample prints evenly-spaced rows."""
    code, out = _run(capsys, "sample", "Linear 0 0 1 1 flipy", "--samples", "3")
    assert code == 0
    assert "0.5000" in out
    assert "1.0000" in out


def test_sample_rejects_small_count(capsys: pytest.CaptureFixture[str]) -> None:
    """--samples below 2 is an error."""
    code, out = _run(capsys, "sample", "Linear 0 0 1 1", "--samples", "1")
    assert code == 1
    assert "--samples must be >= 2" in out


def test_config_precision_applies(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Display precision comes from the config file."""
    config_path = tmp_path / "utilicurve.yaml"
    config_path.write_text("sampling:\n  precision: 2\n")
    code, out = _run(capsys, "--config", str(config_path), "eval", "Linear 0 0 1 1", "0.25")
    assert code == 0
    assert "0.25 -> 0.25" in out


def test_unsupported_config_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Config with an unknown suffix is reported."""
    config_path = tmp_path / "utilicurve.toml"
    config_path.write_text("")
    code, out = _run(capsys, "--config", str(config_path), "shapes")
    assert code == 1
    assert "Could not load config" in out


def test_missing_explicit_config_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """A --config path that does not exist is an error, not a silent fallback."""
    code, out = _run(capsys, "--config", str(tmp_path / "absent.yaml"), "shapes")
    assert code == 1
    assert "Could not load config" in out


def test_log_level_override(capsys: pytest.CaptureFixture[str]) -> None:
    """--log-level DEBUG surfaces the command trace on stdout."""
    code, out = _run(capsys, "--log-level", "DEBUG", "check", "Linear 0 0 1 1")
    assert code == 0
    assert "Running command" in out
