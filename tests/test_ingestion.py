"""Tests for the roster CSV ingestion module."""

import textwrap

import pytest

from src.roster.ingestion import RosterImportError, RosterIngester


def _csv(text):
    return textwrap.dedent(text).lstrip()


@pytest.fixture
def ingester():
    return RosterIngester()


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------

class TestParseText:
    def test_required_columns_only(self, ingester):
        players = ingester.parse_text(_csv("""
            name,pos,adp
            Josh Allen,QB,15
            Breece Hall,RB,7
        """))
        assert [p.name for p in players] == ["Josh Allen", "Breece Hall"]
        assert players[0].position == "QB"
        assert players[0].adp == 15.0

    def test_preserves_file_order(self, ingester):
        players = ingester.parse_text("name,pos,adp\nB,WR,50\nA,WR,1\n")
        assert [p.name for p in players] == ["B", "A"]

    def test_optional_columns(self, ingester):
        players = ingester.parse_text(_csv("""
            name,pos,adp,team,age,rookie,injuryRisk,upside,offense,bye
            Caleb Williams,QB,65,CHI,22,yes,0.15,0.85,2,11
        """))
        p = players[0]
        assert p.team == "CHI"
        assert p.age == 22.0
        assert p.rookie is True
        assert p.injury_risk == pytest.approx(0.15)
        assert p.upside == pytest.approx(0.85)
        assert p.offense == 2.0
        assert p.bye == 11.0

    def test_absent_optionals_are_none(self, ingester):
        p = ingester.parse_text("name,pos,adp\nX,TE,30\n")[0]
        assert p.team is None
        assert p.rookie is False
        assert p.injury_risk is None
        assert p.upside is None
        assert p.offense is None
        assert p.bye is None

    def test_headers_case_insensitive_and_trimmed(self, ingester):
        players = ingester.parse_text(" NAME , Pos ,ADP, InjuryRisk \nX,wr,3,0.2\n")
        assert players[0].position == "WR"
        assert players[0].injury_risk == pytest.approx(0.2)

    def test_position_upper_cased(self, ingester):
        players = ingester.parse_text("name,pos,adp\nX,te,30\n")
        assert players[0].position == "TE"

    def test_empty_name_rows_dropped(self, ingester):
        players = ingester.parse_text("name,pos,adp\n,QB,1\n   ,RB,2\nReal,WR,3\n")
        assert [p.name for p in players] == ["Real"]

    def test_empty_name_row_with_bad_data_is_still_dropped(self, ingester):
        players = ingester.parse_text("name,pos,adp\n,XX,abc\nReal,WR,3\n")
        assert len(players) == 1

    def test_blank_lines_ignored(self, ingester):
        players = ingester.parse_text("name,pos,adp\n\nA,QB,1\n\nB,RB,2\n")
        assert len(players) == 2

    @pytest.mark.parametrize("flag, expected", [
        ("1", True), ("true", True), ("Y", True), ("yes", True),
        ("0", False), ("no", False), ("", False), ("maybe", False),
    ])
    def test_rookie_flag(self, ingester, flag, expected):
        p = ingester.parse_text(f"name,pos,adp,rookie\nX,RB,10,{flag}\n")[0]
        assert p.rookie is expected

    def test_unparseable_optional_numbers_become_absent(self, ingester):
        p = ingester.parse_text(
            "name,pos,adp,injuryRisk,upside,offense,bye,age\nX,RB,10,high,?,n/a,TBD,old\n"
        )[0]
        assert p.injury_risk is None
        assert p.upside is None
        assert p.offense is None
        assert p.bye is None
        assert p.age is None

    def test_quoted_names_with_commas(self, ingester):
        p = ingester.parse_text('name,pos,adp\n"Smith, Jr.",WR,40\n')[0]
        assert p.name == "Smith, Jr."

    def test_read_csv_from_file(self, ingester, tmp_path):
        path = tmp_path / "players.csv"
        path.write_text("name,pos,adp\nA,QB,1\n", encoding="utf-8")
        assert [p.name for p in ingester.read_csv(path)] == ["A"]


# ---------------------------------------------------------------------------
# Validation failures
# ---------------------------------------------------------------------------

class TestValidationErrors:
    def test_missing_required_column(self, ingester):
        with pytest.raises(RosterImportError, match="CSV missing required column: pos"):
            ingester.parse_text("name,adp\nX,1\n")

    def test_invalid_position_names_player(self, ingester):
        with pytest.raises(RosterImportError, match="Invalid position for Bad Guy: XX"):
            ingester.parse_text("name,pos,adp\nGood,QB,1\nBad Guy,XX,2\n")

    def test_kicker_rejected(self, ingester):
        with pytest.raises(RosterImportError, match="Invalid position"):
            ingester.parse_text("name,pos,adp\nKicker,K,150\n")

    @pytest.mark.parametrize("adp", ["abc", "", "inf"])
    def test_invalid_adp_names_player(self, ingester, adp):
        with pytest.raises(RosterImportError, match="Invalid ADP for Someone"):
            ingester.parse_text(f"name,pos,adp\nSomeone,RB,{adp}\n")

    def test_duplicate_names_rejected(self, ingester):
        with pytest.raises(RosterImportError, match="Duplicate player name: Twin"):
            ingester.parse_text("name,pos,adp\nTwin,RB,1\nTwin,WR,2\n")

    def test_header_only(self, ingester):
        with pytest.raises(RosterImportError, match="No rows found"):
            ingester.parse_text("name,pos,adp\n")

    def test_empty_text(self, ingester):
        with pytest.raises(RosterImportError, match="No rows found"):
            ingester.parse_text("")

    def test_only_nameless_rows(self, ingester):
        with pytest.raises(RosterImportError, match="No rows found"):
            ingester.parse_text("name,pos,adp\n,QB,1\n")

    def test_missing_file(self, ingester, tmp_path):
        with pytest.raises(RosterImportError, match="Failed to read"):
            ingester.read_csv(tmp_path / "nope.csv")
