"""Built-in sample roster used before any CSV has been imported."""

from typing import List

from src.roster.models import Player

# (name, pos, team, age, rookie, adp, injury_risk, upside, offense, bye)
_SAMPLE_ROWS = [
    ("Patrick Mahomes", "QB", "KC", 29, False, 12, 0.10, 0.95, 1, 10),
    ("Josh Allen", "QB", "BUF", 29, False, 15, 0.12, 0.92, 1, 12),
    ("C.J. Stroud", "QB", "HOU", 23, False, 18, 0.08, 0.90, 1, 7),
    ("Caleb Williams", "QB", "CHI", 22, True, 65, 0.15, 0.85, 2, 11),
    ("Christian McCaffrey", "RB", "SF", 28, False, 1, 0.18, 0.96, 1, 9),
    ("Breece Hall", "RB", "NYJ", 23, False, 7, 0.20, 0.90, 2, 12),
    ("Bijan Robinson", "RB", "ATL", 22, False, 4, 0.14, 0.92, 2, 10),
    ("Rookie RB A", "RB", "RFA", 21, True, 80, 0.22, 0.78, 3, 7),
    ("Justin Jefferson", "WR", "MIN", 25, False, 2, 0.10, 0.98, 1, 6),
    ("Ja'Marr Chase", "WR", "CIN", 25, False, 3, 0.16, 0.96, 1, 12),
    ("Puka Nacua", "WR", "LAR", 23, False, 14, 0.12, 0.90, 2, 10),
    ("Rookie WR B", "WR", "RFB", 22, True, 75, 0.18, 0.82, 3, 8),
    ("Sam LaPorta", "TE", "DET", 23, False, 22, 0.10, 0.87, 1, 9),
    ("Travis Kelce", "TE", "KC", 35, False, 28, 0.22, 0.82, 1, 10),
    ("Brock Bowers", "TE", "LV", 21, True, 90, 0.16, 0.76, 3, 11),
]


def sample_players() -> List[Player]:
    """Return a fresh list of the sample players."""
    return [
        Player(
            name=name,
            position=pos,
            adp=float(adp),
            team=team,
            age=float(age),
            rookie=rookie,
            injury_risk=injury_risk,
            upside=upside,
            offense=float(offense),
            bye=float(bye),
        )
        for name, pos, team, age, rookie, adp, injury_risk, upside, offense, bye
        in _SAMPLE_ROWS
    ]
