"""CSV ingestion for user-supplied roster files.

Handles the quirks of hand-edited spreadsheets:
- Header names in any case, with stray whitespace
- Blank rows and rows with no player name
- Rookie flags written as 1/true/yes/y
- Optional numeric cells holding junk (treated as absent)

Any structural problem aborts the whole import with a single
:class:`RosterImportError` naming the offending player.
"""

import io
import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from src.roster.cleaning import DataCleaner
from src.roster.config import OPTIONAL_COLUMNS, REQUIRED_COLUMNS, VALID_POSITIONS
from src.roster.models import Player

logger = logging.getLogger(__name__)


class RosterImportError(Exception):
    """Raised when a roster CSV fails validation."""


class RosterIngester:
    """Reads roster CSVs into validated :class:`Player` lists."""

    def __init__(self):
        self.cleaner = DataCleaner()

    def read_csv(self, filepath: Union[str, Path]) -> List[Player]:
        """Read and validate a roster CSV file.

        Raises:
            RosterImportError: if the file is unreadable or fails validation.
        """
        filepath = Path(filepath)
        logger.info("Reading roster: %s", filepath.name)
        try:
            text = filepath.read_text(encoding="utf-8-sig")
        except OSError as e:
            raise RosterImportError(f"Failed to read {filepath}: {e}") from e
        return self.parse_text(text)

    def parse_text(self, text: str) -> List[Player]:
        """Parse CSV text into players.

        Returns:
            Players in file order, with empty-name rows dropped.

        Raises:
            RosterImportError: on a missing required column, an invalid
                position or ADP, a duplicate name, or no usable rows.
        """
        df = self._read_frame(text)

        missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise RosterImportError(f"CSV missing required column: {missing[0]}")

        players: List[Player] = []
        seen = set()
        for _, row in df.iterrows():
            name = self.cleaner.clean_text(row["name"])
            if not name:
                continue
            player = self._row_to_player(name, row)
            if player.name in seen:
                raise RosterImportError(f"Duplicate player name: {player.name}")
            seen.add(player.name)
            players.append(player)

        if not players:
            raise RosterImportError("No rows found.")

        logger.info("Loaded %d players", len(players))
        return players

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _read_frame(self, text: str) -> pd.DataFrame:
        """Read raw CSV text into an all-string DataFrame with normalized headers."""
        try:
            df = pd.read_csv(
                io.StringIO(text),
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
            )
        except pd.errors.EmptyDataError as e:
            raise RosterImportError("No rows found.") from e
        except pd.errors.ParserError as e:
            raise RosterImportError(f"Failed to parse CSV: {e}") from e

        df.columns = [self.cleaner.normalize_header(c) for c in df.columns]
        return df

    def _row_to_player(self, name: str, row: pd.Series) -> Player:
        """Validate one row and build its Player."""
        optional = {
            col.lower(): row[col.lower()] if col.lower() in row.index else None
            for col in OPTIONAL_COLUMNS
        }

        adp = self.cleaner.parse_number(row["adp"])
        if adp is None:
            raise RosterImportError(f"Invalid ADP for {name}")

        position = self.cleaner.normalize_position(row["pos"])
        if position not in VALID_POSITIONS:
            raise RosterImportError(
                f"Invalid position for {name}: {self.cleaner.clean_text(row['pos'])}"
            )

        team = self.cleaner.clean_text(optional["team"])
        return Player(
            name=name,
            position=position,
            adp=adp,
            team=team or None,
            age=self.cleaner.parse_number(optional["age"]),
            rookie=self.cleaner.parse_bool(optional["rookie"]),
            injury_risk=self.cleaner.parse_number(optional["injuryrisk"]),
            upside=self.cleaner.parse_number(optional["upside"]),
            offense=self.cleaner.parse_number(optional["offense"]),
            bye=self.cleaner.parse_number(optional["bye"]),
        )
