"""CLI tests: init, config, roster and play against a temp data dir."""

import io
import sys

import pytest

from croupier.__main__ import main
from croupier.config import get_settings


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    data_dir = tmp_path / "data"
    monkeypatch.setenv("DATA_DIR", str(data_dir))
    get_settings.cache_clear()
    yield data_dir
    get_settings.cache_clear()


def test_init_creates_templates(data_dir):
    assert main(["init", "--data-dir", str(data_dir)]) == 0

    assert (data_dir / "config.yaml").exists()
    assert "Tiki_Monkey,1,2" in (data_dir / "players.txt").read_text(encoding="utf-8")


def test_init_keeps_existing_files(data_dir):
    data_dir.mkdir()
    (data_dir / "players.txt").write_text("Zed\n", encoding="utf-8")

    assert main(["init", "--data-dir", str(data_dir)]) == 0
    assert (data_dir / "players.txt").read_text(encoding="utf-8") == "Zed\n"


def test_config_command(data_dir, capsys):
    main(["init", "--data-dir", str(data_dir)])

    assert main(["config"]) == 0
    assert "Round Interval: 30s" in capsys.readouterr().out


def test_roster_command(data_dir, capsys):
    main(["init", "--data-dir", str(data_dir)])

    assert main(["roster"]) == 0
    out = capsys.readouterr().out
    assert "Roster (2 players)" in out
    assert "Tiki_Monkey\t1.00\t2.00" in out


def test_roster_command_without_file(data_dir, capsys):
    assert main(["roster"]) == 1
    assert "Failed to load roster" in capsys.readouterr().out


def test_roster_command_with_undecodable_file(data_dir, capsys):
    data_dir.mkdir()
    (data_dir / "players.txt").write_bytes(b"Jos\xe9,1,2\n")

    assert main(["roster"]) == 1
    assert "Failed to load roster" in capsys.readouterr().out


def test_play_without_roster_fails_cleanly(data_dir, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("Alice odd 1\nend\n"))

    assert main(["play"]) == 1
    assert "Failed to load roster" in capsys.readouterr().out


def test_play_session(data_dir, monkeypatch, capsys):
    main(["init", "--data-dir", str(data_dir)])
    monkeypatch.setattr(sys, "stdin", io.StringIO("Barbara odd 2\nBarbara 99 2\nEND\n"))

    assert main(["play", "--seed", "3"]) == 0

    out = capsys.readouterr().out
    assert "BET PLACED: Barbara odd 2" in out
    assert "Bets placed: 1" in out
    assert "Bets rejected: 1" in out
    assert "Unresolved at close: 1" in out


def test_no_command_prints_help():
    assert main([]) == 1
