"""Tests for the command line entry point (scripted mode)."""

import pytest

from main import build_config, build_parser, main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("CALCULADORA_STRIP_TRAILING_ZERO", "CALCULADORA_VOICE_ENABLED"):
        monkeypatch.delenv(name, raising=False)


def test_scripted_keys(capsys):
    assert main(["--keys", "5 + 3 ="]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["5 -> 5", "+ -> +", "3 -> 3", "= -> 8.0"]


def test_scripted_repeat_equals(capsys):
    assert main(["--keys", "5 + 5 = ="]) == 0
    assert capsys.readouterr().out.splitlines()[-2:] == ["= -> 10.0", "= -> 15.0"]


def test_strip_zeros_flag(capsys):
    assert main(["--keys", "5 + 3 =", "--strip-zeros"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "= -> 8"


def test_unknown_token(capsys):
    assert main(["--keys", "5 sqrt"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "sqrt" in captured.err


def test_build_config_merges_env_and_flags():
    args = build_parser().parse_args(["--voice", "--width", "400"])
    config = build_config(args, {"CALCULADORA_WINDOW_HEIGHT": "600"})
    assert config.voice_enabled is True
    assert config.window_width == 400
    assert config.window_height == 600


def test_invalid_env_is_reported(monkeypatch, capsys):
    monkeypatch.setenv("CALCULADORA_WINDOW_WIDTH", "wide")
    assert main(["--keys", "1"]) == 1
    assert "CALCULADORA_WINDOW_WIDTH" in capsys.readouterr().out


@pytest.mark.parametrize("flag", ["--width", "--height"])
def test_window_size_must_be_positive(flag, capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args([flag, "-5"])
    assert excinfo.value.code == 2
    assert "debe ser positivo" in capsys.readouterr().err
