import pytest

import spellduel.cli as cli


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    # Keep the root logger and the real user config dir out of the tests.
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    monkeypatch.setattr(cli, "default_user_settings_path", lambda: tmp_path / "absent.yaml")


def settings_file(tmp_path, text):
    path = tmp_path / "duel.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_forced_sequence_win(tmp_path, capsys):
    path = settings_file(tmp_path, "hero:\n  health: 10\n  mana: 250\nboss:\n  health: 13\n  attack: 1\n")
    code = cli.main(["--settings", path, "--sequence", "Poison", "MagicMissile"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Winner: Wizard after 3 rounds" in out
    assert "Mana spent: 226" in out
    assert "Spells: Poison, MagicMissile" in out


def test_hero_loss_exit_code(tmp_path, capsys):
    path = settings_file(tmp_path, "hero:\n  health: 1\n  mana: 0\nboss:\n  attack: 5\n")
    assert cli.main(["--settings", path]) == 1
    assert "Winner: Boss after 1 rounds" in capsys.readouterr().out


def test_round_limit_override(tmp_path, capsys):
    path = settings_file(tmp_path, "hero:\n  health: 100\n  mana: 0\nboss:\n  health: 500\n  attack: 1\n")
    assert cli.main(["--settings", path, "--max-rounds", "3"]) == 1
    assert "Winner: none after 3 rounds" in capsys.readouterr().out


def test_unknown_spell_in_sequence():
    assert cli.main(["--sequence", "Fireball"]) == 2


def test_invalid_settings(tmp_path):
    path = settings_file(tmp_path, "boss:\n  health: -5\n")
    assert cli.main(["--settings", path]) == 2


def test_seeded_runs_match(capsys):
    cli.main(["--seed", "7"])
    first = capsys.readouterr().out
    cli.main(["--seed", "7"])
    assert capsys.readouterr().out == first
