"""Unit tests for roster loading."""

from decimal import Decimal

import pytest

from croupier.roster import load_roster, parse_roster
from croupier.table import RosterLoadError


def test_load_roster_reads_names_and_totals(tmp_path):
    path = tmp_path / "players.txt"
    path.write_text("Tiki_Monkey,1,2\nBarbara\n", encoding="utf-8")

    registry = load_roster(path)

    assert registry.names == ["Tiki_Monkey", "Barbara"]
    tiki = registry.get("Tiki_Monkey")
    assert tiki.total_won == Decimal("1")
    assert tiki.total_wagered == Decimal("2")
    barbara = registry.get("Barbara")
    assert barbara.total_won == Decimal("0")
    assert barbara.total_wagered == Decimal("0")
    assert barbara.bets == []


def test_unparsable_totals_default_to_zero():
    players = parse_roster("Ann,lots,-4\nBen,,3.5\nCid,NaN\nDee,1e1000000,2\n")

    totals = {p.name: (p.total_won, p.total_wagered) for p in players}
    assert totals == {
        "Ann": (Decimal("0"), Decimal("0")),
        "Ben": (Decimal("0"), Decimal("3.5")),
        "Cid": (Decimal("0"), Decimal("0")),
        "Dee": (Decimal("0"), Decimal("2")),
    }


def test_blank_lines_comments_and_whitespace_are_ignored():
    players = parse_roster("# roster\n\n  Ann , 2 , 1 \n,5,5\n")

    assert [p.name for p in players] == ["Ann"]
    assert players[0].total_won == Decimal("2")


def test_duplicate_names_keep_first_entry():
    players = parse_roster("Ann,1\nBen\nAnn,99\n")

    assert [p.name for p in players] == ["Ann", "Ben"]
    assert players[0].total_won == Decimal("1")


def test_custom_delimiter():
    players = parse_roster("Ann;4;8\n", delimiter=";")
    assert players[0].total_wagered == Decimal("8")


def test_missing_file_raises(tmp_path):
    with pytest.raises(RosterLoadError) as exc_info:
        load_roster(tmp_path / "missing.txt")
    assert exc_info.value.path == tmp_path / "missing.txt"


def test_non_utf8_file_raises(tmp_path):
    path = tmp_path / "players.txt"
    path.write_bytes(b"Jos\xe9,1,2\n")

    with pytest.raises(RosterLoadError) as exc_info:
        load_roster(path)
    assert exc_info.value.path == path
    assert "utf-8" in str(exc_info.value)


def test_empty_file_raises(tmp_path):
    path = tmp_path / "players.txt"
    path.write_text("\n  \n", encoding="utf-8")

    with pytest.raises(RosterLoadError):
        load_roster(path)


def test_comment_only_file_loads_empty_registry(tmp_path):
    path = tmp_path / "players.txt"
    path.write_text("# nobody yet\n", encoding="utf-8")

    assert not load_roster(path)
