"""
End-to-end CLI tests: the full program through the console adapter.
"""

from pathlib import Path

import pytest

from matecheck.app_shell.cli import BANNER, get_rules, main, run_program


def test_main_prints_golden_transcript(capsys, golden_transcript):
    main([])

    captured = capsys.readouterr()
    assert captured.out == golden_transcript


def test_main_is_repeatable(capsys):
    main([])
    first = capsys.readouterr().out
    main([])
    second = capsys.readouterr().out

    assert first == second


def test_main_rejects_arguments(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--bishop", "3"])

    assert exc_info.value.code == 2
    assert capsys.readouterr().out == ""


def test_run_program_starts_with_banner(rules, memory_out):
    run_program(rules, memory_out)

    assert tuple(memory_out.lines[: len(BANNER)]) == BANNER


def test_get_rules_exits_on_missing_file(tmp_path: Path):
    with pytest.raises(SystemExit) as exc_info:
        get_rules(tmp_path / "missing.yaml")

    assert exc_info.value.code == 1


def test_get_rules_exits_on_invalid_file(tmp_path: Path):
    path = tmp_path / "rules.yaml"
    path.write_text("moves: {bishop: -5}\n")

    with pytest.raises(SystemExit) as exc_info:
        get_rules(path)

    assert exc_info.value.code == 1
