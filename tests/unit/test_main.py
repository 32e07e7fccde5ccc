"""End-to-end tests for the CLI entrypoint."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from unittest.mock import Mock

import pytest

from rosalind_cli.runner import main as main_module
from rosalind_cli.runner.main import build_parser, main, raw_options


def test_dna_task_prints_counts(data_file: Callable[..., Path], capsys: pytest.CaptureFixture[str]) -> None:
    path = data_file("AGCT\n")

    assert main(["-t", "dna", "-d", str(path)]) == 0

    out, err = capsys.readouterr()
    assert out == "Result: 1 1 1 1\n"
    assert err == ""


def test_fib_task_uses_numeric_options(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--task", "fib", "-n", "5", "-k", "3"]) == 0

    assert capsys.readouterr().out == "Result: 19\n"


def test_revc_task_with_long_data_option(data_file: Callable[..., Path], capsys: pytest.CaptureFixture[str]) -> None:
    path = data_file("AAAACCCGGT")

    assert main(["-t", "revc", "--data", str(path)]) == 0

    assert capsys.readouterr().out == "Result: ACCGGGTTTT\n"


def test_hamm_task_reads_two_lines(data_file: Callable[..., Path], capsys: pytest.CaptureFixture[str]) -> None:
    path = data_file("GAGCCTACTAACGGGAT\nCATCGTAATGACGGCCT\n")

    assert main(["-t", "hamm", "-d", str(path)]) == 0

    assert capsys.readouterr().out == "Result: 7\n"


def test_cons_task_prints_both_stages(data_file: Callable[..., Path], capsys: pytest.CaptureFixture[str]) -> None:
    path = data_file(">r1\nATCCAGCT\n>r2\nGGGCAACT\n>r3\nATGGATCT\n")

    assert main(["-t", "cons", "-d", str(path)]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Profile:\nA: 2 0 0 0 3 1 0 0\n")
    assert out.endswith("Consensus:\nATGCAACT\n")


def test_unknown_task_is_reported_without_failing(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-t", "xyz"]) == 0

    assert capsys.readouterr().out == "Unknown task: xyz\n"


def test_domain_error_is_reported_on_stdout(data_file: Callable[..., Path], capsys: pytest.CaptureFixture[str]) -> None:
    path = data_file("GAGC\nCAT\n")

    assert main(["-t", "hamm", "-d", str(path)]) == 0

    out = capsys.readouterr().out
    assert out.startswith("LengthMismatch: ")


@pytest.mark.parametrize(
    ("argv", "kind"),
    [
        (["-t", "fib", "-n", "5"], "MissingParameter: task 'fib' requires option -k"),
        (["-t", "fibd", "-m", "3"], "MissingParameter: task 'fibd' requires option -n"),
        (["-t", "dna"], "MissingParameter: task 'dna' requires option -d"),
        (["-t", "fib", "-n", "five", "-k", "3"], "InvalidNumber: option -n got 'five'"),
        (["-t", "dna", "-d", "missing.txt"], "InputUnreadable: cannot read 'missing.txt'"),
        (["-t", "fib", "-n", "1" * 5000, "-k", "3"], "InvalidNumber: option -n got"),
        (["-t", "fib", "-n", "5", "-k", "6"], "InvalidNumber: option -k got '6': must not exceed 5"),
    ],
)
def test_parameter_errors_are_fatal(
    argv: list[str], kind: str, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    spy = Mock()
    monkeypatch.setattr(main_module, "dispatch", spy)

    assert main(argv) == 2

    out, err = capsys.readouterr()
    assert out == ""
    assert kind in err
    spy.assert_not_called()


def test_missing_task_option_aborts(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["-d", "data.txt"])

    assert exc.value.code == 2
    assert "--task" in capsys.readouterr().err


def test_malformed_syntax_aborts(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["-t", "dna", "--bogus"])

    assert exc.value.code == 2
    assert capsys.readouterr().out == ""


def test_help_exits_before_validation(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    spy = Mock()
    monkeypatch.setattr(main_module, "validate", spy)

    with pytest.raises(SystemExit) as exc:
        main(["-h"])

    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "usage: rosalind-cli" in out
    assert "cons" in out and "Calculating Consensus and Profile" in out
    spy.assert_not_called()


def test_invalid_settings_abort(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("LOG_LEVEL", "LOUD")

    assert main(["-t", "fib", "-n", "5", "-k", "3"]) == 2

    out, err = capsys.readouterr()
    assert out == ""
    assert "Configuration error" in err


def test_max_numeric_param_setting_is_applied(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("ROSALIND_MAX_NUMERIC_PARAM", "4")

    assert main(["-t", "fib", "-n", "5", "-k", "3"]) == 2

    assert "must not exceed 4" in capsys.readouterr().err


def test_unexpected_error_exits_with_one(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(main_module, "dispatch", Mock(side_effect=RuntimeError("bug")))

    assert main(["-t", "fib", "-n", "5", "-k", "3"]) == 1

    out, err = capsys.readouterr()
    assert out == ""
    assert "Task failed" in err


def test_raw_options_cover_every_parameter() -> None:
    args = build_parser().parse_args(["-t", "fibd", "-n", "6", "-m", "3"])

    assert raw_options(args) == {"d": None, "k": None, "m": "3", "n": "6"}


def test_same_inputs_give_same_output(data_file: Callable[..., Path], capsys: pytest.CaptureFixture[str]) -> None:
    path = data_file(">a\nATGC\n>b\nGGCC\n")

    main(["-t", "gc", "-d", str(path)])
    first = capsys.readouterr().out
    main(["-t", "gc", "-d", str(path)])

    assert capsys.readouterr().out == first == "Result: b\n100.000000\n"


@pytest.mark.parametrize(
    ("argv", "prefix"),
    [
        (["-t", "fib", "-n", "100", "-k", "5"], "Result: "),
        (["-t", "fibd", "-n", "100", "-m", "20"], "Result: "),
    ],
)
def test_largest_accepted_numbers_print_a_result(
    argv: list[str], prefix: str, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(argv) == 0

    out = capsys.readouterr().out
    assert out.startswith(prefix)
    assert out[len(prefix) :].strip().isdigit()


def test_domain_error_logs_warning_json_to_stderr(
    data_file: Callable[..., Path], capsys: pytest.CaptureFixture[str]
) -> None:
    path = data_file("GAGC\nCAT\n")

    assert main(["-t", "hamm", "-d", str(path)]) == 0

    out, err = capsys.readouterr()
    assert out.startswith("LengthMismatch: ")
    records = [json.loads(line) for line in err.strip().splitlines()]
    warnings = [r for r in records if r["level"] == "WARNING"]
    assert len(warnings) == 1
    assert warnings[0]["logger"] == "rosalind_cli.runner.dispatch"
    assert warnings[0]["extra"] == {"task": "hamm", "kind": "LengthMismatch", "completed_stages": 0}
