# tests/test_cli.py

import pytest

from digitrig import cli


def test_eval_prints_the_value(capsys):
    assert cli.main(["eval", "sin_smoother", "0.5235987755982988"]) == 0
    out = capsys.readouterr().out
    assert float(out) == pytest.approx(0.5, abs=1e-7)


def test_eval_atan2_takes_y_then_x(capsys):
    """Negative numbers are positional arguments, not options."""
    assert cli.main(["eval", "atan2_deg360", "-1", "0"]) == 0
    assert capsys.readouterr().out.strip() == "270.0"


def test_eval_rejects_unknown_function_and_wrong_arity(capsys):
    assert cli.main(["eval", "sinh", "1.0"]) == 1
    assert "unknown function" in capsys.readouterr().err
    # module names are exported too, but are not callable
    assert cli.main(["eval", "bits", "1.0"]) == 1
    capsys.readouterr()
    assert cli.main(["eval", "atan2", "1.0"]) == 1
    assert "argument" in capsys.readouterr().err


def test_interp_list_and_values(capsys):
    assert cli.main(["interp", "--list"]) == 0
    tags = capsys.readouterr().out.split()
    assert "bounceOut" in tags
    assert "linear" in tags

    assert cli.main(["interp", "pow2In", "0.5"]) == 0
    assert capsys.readouterr().out.strip() == "0.5\t0.25"

    assert cli.main(["interp", "linear"]) == 0
    assert len(capsys.readouterr().out.strip().splitlines()) == 5


def test_interp_errors(capsys):
    assert cli.main(["interp", "noSuchCurve", "0.5"]) == 1
    assert "--list" in capsys.readouterr().err
    assert cli.main(["interp"]) == 1


def test_sine_table_tool(capsys):
    assert cli.main(["sine-table", "--bits", "6", "--samples", "200"]) == 0
    out = capsys.readouterr().out
    assert "smoother" in out
    assert "64" in out


def test_error_report_tool(capsys, tmp_path):
    path = tmp_path / "errors.txt"
    assert cli.main(["errors", "--only", "asin_deg", "--samples", "100", "--out-txt", str(path)]) == 0
    out = capsys.readouterr().out
    assert "asin_deg" in out
    assert "acos" not in out
    assert "asin_deg" in path.read_text(encoding="utf-8")

    assert cli.main(["errors", "--only", "nothing_matches"]) == 1


def test_pade_tan_tool(capsys):
    assert cli.main(["pade-tan"]) == 0
    out = capsys.readouterr().out
    assert "[5/4]" in out
    assert "1/945" in out
    assert "-4/9" in out
