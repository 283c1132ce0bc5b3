"""Value cleaning for roster CSV cells.

CSV cells arrive as raw strings. These helpers standardize them:
- Normalize header names for case-insensitive matching
- Parse rookie flags leniently
- Parse optional numbers, treating garbage as absent
- Canonicalize positions
"""

import math
from typing import Optional

import pandas as pd

from src.roster.config import TRUTHY_VALUES


class DataCleaner:
    """Cleans and standardizes raw roster CSV values."""

    # ------------------------------------------------------------------
    # Headers
    # ------------------------------------------------------------------
    @staticmethod
    def normalize_header(header: str) -> str:
        """Trim and lowercase a header ("  injuryRisk " -> "injuryrisk")."""
        return str(header).strip().lower()

    # ------------------------------------------------------------------
    # Cell values
    # ------------------------------------------------------------------
    @staticmethod
    def clean_text(value) -> str:
        """Return a stripped string, or "" for missing values."""
        if value is None or pd.isna(value):
            return ""
        return str(value).strip()

    @staticmethod
    def parse_bool(value) -> bool:
        """True for 1/true/yes/y (case-insensitive), False for anything else."""
        return DataCleaner.clean_text(value).lower() in TRUTHY_VALUES

    @staticmethod
    def parse_number(value) -> Optional[float]:
        """Parse a finite number.

        Examples:
            "12"    -> 12.0
            " 0.5 " -> 0.5
            ""      -> None
            "n/a"   -> None
            "inf"   -> None
        """
        s = DataCleaner.clean_text(value)
        if not s:
            return None
        try:
            number = float(s)
        except ValueError:
            return None
        return number if math.isfinite(number) else None

    @staticmethod
    def normalize_position(value) -> str:
        """Upper-case a position string ("wr" -> "WR")."""
        return DataCleaner.clean_text(value).upper()
