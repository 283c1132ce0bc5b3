"""CSV export of the ranked board and the blank import template."""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd

from src.roster.config import EXPORT_COLUMNS, TEMPLATE_COLUMNS, TEMPLATE_EXAMPLE_ROWS

logger = logging.getLogger(__name__)


def _format_number(value: Optional[float]) -> str:
    """Render a number for CSV, dropping a trailing ``.0`` (12.0 -> "12")."""
    if value is None:
        return ""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def board_to_frame(ranked: Iterable) -> pd.DataFrame:
    """Build the export table from ranked players.

    Args:
        ranked: Iterable of ranked players (anything exposing ``player``
            and ``rank_now``), in display order.

    Returns:
        All-string DataFrame with columns :data:`EXPORT_COLUMNS`.
    """
    rows = []
    for entry in ranked:
        p = entry.player
        rows.append({
            "name": p.name,
            "pos": p.position,
            "adp": _format_number(p.adp),
            "rookie": "1" if p.rookie else "0",
            "upside": _format_number(p.upside),
            "injuryRisk": _format_number(p.injury_risk),
            "offense": _format_number(p.offense),
            "bye": _format_number(p.bye),
            "rankNow": str(entry.rank_now),
        })
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def board_to_csv(ranked: Iterable) -> str:
    """Render the ranked board as CSV text."""
    return board_to_frame(ranked).to_csv(index=False, lineterminator="\n")


def write_board_csv(ranked: Iterable, filepath: Union[str, Path]) -> Path:
    """Write the ranked board to *filepath* and return the path."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    df = board_to_frame(ranked)
    df.to_csv(filepath, index=False, lineterminator="\n")
    logger.info("Exported %d ranked players to %s", len(df), filepath)
    return filepath


def template_csv() -> str:
    """CSV text for the import template: full header plus example rows."""
    df = pd.DataFrame(TEMPLATE_EXAMPLE_ROWS, columns=TEMPLATE_COLUMNS)
    return df.to_csv(index=False, lineterminator="\n")


def write_template_csv(filepath: Union[str, Path]) -> Path:
    """Write the import template to *filepath* and return the path."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_text(template_csv(), encoding="utf-8")
    logger.info("Wrote roster template to %s", filepath)
    return filepath
