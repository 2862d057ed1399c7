import pytest

from iching import config
from iching.cli import build_parser, default_method, main
from iching.display import ColorPreference, format_hexagram_lines
from iching.divination import DivinationMethod
from iching.hexagram import Hexagram


def run(capsys, *argv):
    code = main(["--color", "never", *argv])
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_no_command_prints_help(capsys):
    code, out, _ = run(capsys)
    assert code == 0
    assert "divine" in out
    assert "hexagram" in out


def test_parser_defaults():
    args = build_parser().parse_args(["divine"])
    assert args.method is None
    assert default_method() is DivinationMethod.ANCIENT_YARROW_STALK
    assert args.color is ColorPreference.AUTO
    assert args.seed is None


def test_parser_rejects_unknown_method():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["divine", "-m", "tea-leaves"])


def test_hexagram_command(capsys):
    code, out, _ = run(capsys, "hexagram", "1")
    assert code == 0
    assert "Hexagram No. 1" in out
    assert "The Creative" in out
    assert "Judgement:" in out


@pytest.mark.parametrize("number", ["0", "65"])
def test_hexagram_command_out_of_range(capsys, number):
    code, _, err = run(capsys, "hexagram", number)
    assert code == 1
    assert err.startswith("Error:")


def test_trigram_command(capsys):
    code, out, _ = run(capsys, "trigram", "4")
    assert code == 0
    assert "Zhèn - The Arousing" in out
    assert "first son" in out


def test_trigram_command_out_of_range(capsys):
    code, _, err = run(capsys, "trigram", "9")
    assert code == 1
    assert "between 1-8" in err


def test_cast_command(capsys):
    code, out, _ = run(capsys, "cast", "777977", "-q", "Should I go?")
    assert code == 0
    assert "Should I go?" in out
    assert "Line 4 changes:" in out
    assert "Changes into:" in out
    assert "Hexagram No. 9" in out


def test_cast_command_rejects_bad_digits(capsys):
    code, _, err = run(capsys, "cast", "12345")
    assert code == 1
    assert "Error:" in err


def test_divine_command_with_seed_is_repeatable(capsys):
    first = run(capsys, "divine", "--seed", "5", "-m", "coin-toss", "--no-nuclear")
    second = run(capsys, "divine", "--seed", "5", "-m", "coin-toss", "--no-nuclear")
    assert first[0] == second[0] == 0
    strip_time = lambda out: [line for line in out.splitlines() if "Time:" not in line]
    assert strip_time(first[1]) == strip_time(second[1])
    assert "Primary Hexagram" in first[1]
    assert "Nuclear Hexagram" not in first[1]


def test_missing_data_file(capsys, tmp_path):
    code, _, err = run(capsys, "--data", str(tmp_path / "missing.json"), "hexagram", "1")
    assert code == 1
    assert "Failed to load hexagram data" in err


def test_format_hexagram_lines_marks_changing_lines():
    lines = format_hexagram_lines(Hexagram.from_digits("677778"))
    assert lines[0] == "━━   ━━"
    assert lines[-1] == "━━   ━━ ✦"
    assert lines[1] == "━━━━━━━"


def test_default_method_from_environment(monkeypatch):
    monkeypatch.setattr(config, "DEFAULT_METHOD", "coin-toss")
    assert default_method() is DivinationMethod.COIN_TOSS


def test_bad_default_method_only_affects_divine(capsys, monkeypatch):
    monkeypatch.setattr(config, "DEFAULT_METHOD", "tea-leaves")
    assert run(capsys, "trigram", "1")[0] == 0
    assert run(capsys, "divine", "-m", "coin-toss", "--seed", "3")[0] == 0

    code, _, err = run(capsys, "divine", "--seed", "3")
    assert code == 1
    assert err.startswith("Error: ICHING_DEFAULT_METHOD")
    assert "tea-leaves" in err


def test_bad_log_level_from_environment(capsys, monkeypatch):
    monkeypatch.setattr(config, "LOG_LEVEL", "verbose")
    code, _, err = run(capsys, "trigram", "1")
    assert code == 1
    assert err.startswith("Error: ICHING_LOG_LEVEL")
    assert "'VERBOSE'" in err


def test_log_level_flag_overrides_environment(capsys, monkeypatch):
    monkeypatch.setattr(config, "LOG_LEVEL", "verbose")
    assert run(capsys, "--log-level", "debug", "trigram", "1")[0] == 0
