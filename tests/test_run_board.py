"""Tests for the draft board command-line front end."""

import json

import pytest

from src.draft_manager.run_board import build_parser, run


@pytest.fixture
def cli(tmp_path):
    """Run a CLI command against a throwaway session directory."""
    state_dir = tmp_path / "session"

    def _run(*argv):
        return run(["--state-dir", str(state_dir), *argv])

    _run.state_dir = state_dir
    return _run


def _stored(cli):
    return json.loads((cli.state_dir / "tdb_v1_state.json").read_text(encoding="utf-8"))


# ── Parser ───────────────────────────────────────────────────────────


class TestParser:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_weight_flags(self):
        args = build_parser().parse_args(["weights", "--qb", "150", "--adp-anchor", "10"])
        assert args.qb == 150
        assert args.adp_anchor == 10
        assert args.rb is None


# ── Board ────────────────────────────────────────────────────────────


class TestBoardCommand:
    def test_prints_sample_board(self, cli, capsys):
        assert cli("board") == 0
        out = capsys.readouterr().out
        assert len(out.splitlines()) == 15
        assert "Christian McCaffrey" in out

    def test_limit_and_position(self, cli, capsys):
        assert cli("board", "--position", "qb", "--limit", "2") == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert all(" QB " in line for line in lines)

    def test_invalid_position(self, cli, capsys):
        assert cli("board", "--position", "K") == 1
        assert "Invalid position filter" in capsys.readouterr().err

    def test_no_match(self, cli, capsys):
        cli("board", "--search", "zzz")
        assert "No players match." in capsys.readouterr().out

    def test_show_taken_persists(self, cli, capsys):
        cli("pick", "Justin Jefferson")
        cli("board", "--show-taken")
        assert "(taken)" in capsys.readouterr().out
        assert _stored(cli)["showTakenInList"] is True


# ── Draft ────────────────────────────────────────────────────────────


class TestPickCommands:
    def test_pick_persists_between_runs(self, cli, capsys):
        assert cli("pick", "Justin Jefferson", "--mine") == 0
        assert cli("pick", "Bijan Robinson") == 0
        data = _stored(cli)
        assert [p["name"] for p in data["picks"]] == ["Justin Jefferson", "Bijan Robinson"]
        assert data["myRoster"] == ["Justin Jefferson"]
        assert "Pick #2: Bijan Robinson" in capsys.readouterr().out

    def test_duplicate_pick_fails(self, cli, capsys):
        cli("pick", "Josh Allen")
        assert cli("pick", "Josh Allen") == 1
        assert "already drafted" in capsys.readouterr().err
        assert len(_stored(cli)["picks"]) == 1

    def test_unknown_pick_fails(self, cli):
        assert cli("pick", "Nobody") == 1

    def test_undo(self, cli, capsys):
        cli("pick", "Josh Allen")
        assert cli("undo") == 0
        assert _stored(cli)["picks"] == []
        assert "Undid #1: Josh Allen" in capsys.readouterr().out

    def test_undo_empty(self, cli, capsys):
        assert cli("undo") == 0
        assert "No picks to undo." in capsys.readouterr().out

    def test_reset(self, cli):
        cli("pick", "Josh Allen", "--mine")
        assert cli("reset") == 0
        assert _stored(cli)["picks"] == []

    def test_upcoming(self, cli, capsys):
        cli("league", "--teams", "12", "--slot", "12")
        capsys.readouterr()
        assert cli("upcoming") == 0
        out = capsys.readouterr().out
        assert "No picks yet." in out
        assert "#12  Round 1, Pick 12" in out
        assert "#13  Round 2, Pick 12" in out
        assert "#36  Round 3, Pick 12" in out


# ── Settings ─────────────────────────────────────────────────────────


class TestSettingsCommands:
    def test_weights(self, cli):
        assert cli("weights", "--qb", "150", "--adp-anchor", "250") == 0
        data = _stored(cli)
        assert data["qbW"] == 150
        assert data["adpAnchor"] == 100

    def test_weights_reset(self, cli):
        cli("weights", "--rookie-boost", "90")
        cli("weights", "--reset")
        assert _stored(cli)["rookieBoost"] == 20

    def test_league(self, cli):
        assert cli("league", "--teams", "10", "--slot", "4", "--rounds", "16") == 0
        data = _stored(cli)
        assert (data["teams"], data["mySlot"], data["rounds"]) == (10, 4, 16)

    def test_summary(self, cli, capsys):
        assert cli("summary") == 0
        out = capsys.readouterr().out
        assert "Top 24 mix: QB=4, RB=4, WR=4, TE=3" in out
        assert "Round 1:" in out
        assert "Round 3: Not enough players in pool." in out


# ── Files ────────────────────────────────────────────────────────────


class TestFileCommands:
    def test_import(self, cli, tmp_path, capsys):
        path = tmp_path / "players.csv"
        path.write_text("name,pos,adp\nSolo QB,QB,5\nDuo RB,RB,8\n", encoding="utf-8")
        cli("pick", "Josh Allen")
        assert cli("import", str(path)) == 0
        assert "Imported 2 players" in capsys.readouterr().out
        data = _stored(cli)
        assert [p["name"] for p in data["players"]] == ["Solo QB", "Duo RB"]
        assert data["picks"] == []

    def test_import_failure(self, cli, tmp_path, capsys):
        path = tmp_path / "players.csv"
        path.write_text("name,adp\nSolo,5\n", encoding="utf-8")
        assert cli("import", str(path)) == 1
        assert "CSV missing required column: pos" in capsys.readouterr().err

    def test_sample_restores_roster(self, cli, tmp_path):
        path = tmp_path / "players.csv"
        path.write_text("name,pos,adp\nSolo QB,QB,5\n", encoding="utf-8")
        cli("import", str(path))
        assert cli("sample") == 0
        assert len(_stored(cli)["players"]) == 15

    def test_export(self, cli, tmp_path):
        out = tmp_path / "board.csv"
        assert cli("export", str(out), "--position", "TE") == 0
        assert len(out.read_text().splitlines()) == 4

    def test_template(self, cli, tmp_path):
        out = tmp_path / "template.csv"
        assert cli("template", str(out)) == 0
        assert out.read_text().startswith("name,pos,adp")
