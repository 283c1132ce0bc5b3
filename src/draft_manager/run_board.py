"""Command-line front end for the draft board.

Usage:
    python -m src.draft_manager.run_board [--state-dir DIR] COMMAND [args]

Examples:
    python -m src.draft_manager.run_board import players.csv
    python -m src.draft_manager.run_board weights --qb 60 --adp-anchor 30
    python -m src.draft_manager.run_board board --position RB --limit 20
    python -m src.draft_manager.run_board pick "Bijan Robinson" --mine
    python -m src.draft_manager.run_board upcoming
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from src.draft_manager.config import SESSION_DIR
from src.draft_manager.draft_session import DraftSession
from src.draft_manager.snake import snake_position
from src.draft_manager.state_persistence import FileKeyValueStore, StatePersistence
from src.logging_config import setup_logging
from src.ranking_engine.config import ALL_POSITIONS
from src.roster.config import BOARD_FILENAME, EXPORT_DIR, TEMPLATE_FILENAME
from src.roster.ingestion import RosterImportError

logger = logging.getLogger(__name__)

# WeightSettings fields exposed as --flags
_WEIGHT_FIELDS = (
    "qb", "rb", "wr", "te",
    "rookie_boost", "risk_averse", "upside_weight", "adp_anchor", "offense_weight",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Custom fantasy draft board.")
    parser.add_argument(
        "--state-dir", type=Path, default=SESSION_DIR,
        help="Directory holding the saved session",
    )
    parser.add_argument("--log-level", default="INFO")
    sub = parser.add_subparsers(dest="command", required=True)

    board = sub.add_parser("board", help="Print the ranked board")
    board.add_argument("--position", default=ALL_POSITIONS)
    board.add_argument("--search", default="")
    board.add_argument("--limit", type=int, default=None)
    board.add_argument("--show-taken", action="store_true", default=None)
    board.add_argument("--hide-taken", dest="show_taken", action="store_false", default=None)

    imp = sub.add_parser("import", help="Replace the roster from a CSV file")
    imp.add_argument("csv", type=Path)

    exp = sub.add_parser("export", help="Write the current board to CSV")
    exp.add_argument("csv", type=Path, nargs="?", default=EXPORT_DIR / BOARD_FILENAME)
    exp.add_argument("--position", default=ALL_POSITIONS)
    exp.add_argument("--search", default="")

    tpl = sub.add_parser("template", help="Write a blank roster CSV template")
    tpl.add_argument("csv", type=Path, nargs="?", default=EXPORT_DIR / TEMPLATE_FILENAME)

    pick = sub.add_parser("pick", help="Record a pick")
    pick.add_argument("name")
    pick.add_argument("--mine", action="store_true", help="The pick is yours")

    sub.add_parser("undo", help="Undo the last pick")
    sub.add_parser("reset", help="Clear every pick")
    sub.add_parser("sample", help="Load the sample roster")
    sub.add_parser("upcoming", help="Show your next picks and the pick log")
    sub.add_parser("summary", help="Show role counts, best available and round preview")

    weights = sub.add_parser("weights", help="Adjust scoring weights")
    for name in _WEIGHT_FIELDS:
        weights.add_argument(f"--{name.replace('_', '-')}", dest=name, type=int)
    weights.add_argument("--reset", action="store_true")

    league = sub.add_parser("league", help="Adjust league settings")
    league.add_argument("--teams", type=int)
    league.add_argument("--slot", dest="my_slot", type=int)
    league.add_argument("--rounds", type=int)
    league.add_argument("--reset", action="store_true")

    return parser


def _print_board(session: DraftSession, limit: Optional[int]):
    taken = session.controller.taken_names
    board = session.ranked()
    if limit is not None:
        board = board[:limit]
    for entry in board:
        flag = "  (taken)" if entry.name in taken else ""
        print(
            f"{entry.rank_now:>4}  {entry.position:<2}  {entry.name:<26}"
            f" ADP {entry.player.adp:>6g}  delta {entry.delta:+4d}"
            f"  score {entry.score:.3f}{flag}"
        )
    if not board:
        print("No players match.")


def _print_upcoming(session: DraftSession):
    teams = session.league_config.teams
    for pick in session.picks:
        round_, slot = pick.round_and_slot(teams)
        mine = "  [mine]" if pick.is_mine else ""
        print(f"#{pick.overall} R{round_} P{slot}  {pick.position}  {pick.name}{mine}")
    if not session.picks:
        print("No picks yet.")
    print("Your upcoming picks:")
    for overall in session.upcoming_picks():
        round_, slot = snake_position(overall, teams)
        print(f"  #{overall}  Round {round_}, Pick {slot}")


def _print_summary(session: DraftSession):
    counts = session.position_summary()
    print("Top 24 mix: " + ", ".join(f"{pos}={n}" for pos, n in counts.items()))
    print("Best available:")
    for entry in session.best_available():
        print(f"  {entry.position:<2} {entry.name:<26} delta {entry.delta:+d}")
    for i, round_players in enumerate(session.round_preview(), start=1):
        names = ", ".join(f"{e.name} ({e.position})" for e in round_players)
        print(f"Round {i}: {names or 'Not enough players in pool.'}")


def run(argv: Optional[List[str]] = None) -> int:
    """Parse *argv* and run one CLI command. Returns the process exit code."""
    return execute(build_parser().parse_args(argv))


def execute(args: argparse.Namespace) -> int:
    """Run the command described by parsed *args*."""
    session = DraftSession(StatePersistence(FileKeyValueStore(args.state_dir)))

    if args.command in ("board", "export"):
        try:
            session.set_filters(position=args.position, search=args.search)
        except ValueError as e:
            print(str(e), file=sys.stderr)
            return 1

    if args.command == "board":
        if args.show_taken is not None:
            session.set_show_taken(args.show_taken)
        _print_board(session, args.limit)
    elif args.command == "import":
        try:
            session.import_csv(args.csv)
        except RosterImportError as e:
            print(f"Import failed: {e}", file=sys.stderr)
            return 1
        print(f"Imported {len(session.roster)} players; draft cleared.")
    elif args.command == "export":
        print(f"Board written to {session.export_csv(args.csv)}")
    elif args.command == "template":
        print(f"Template written to {session.export_template(args.csv)}")
    elif args.command == "pick":
        pick = session.add_pick(args.name, is_mine=args.mine)
        if pick is None:
            print(f"Cannot pick '{args.name}': unknown or already drafted.", file=sys.stderr)
            return 1
        print(f"Pick #{pick.overall}: {pick.name}")
    elif args.command == "undo":
        pick = session.undo_pick()
        print(f"Undid #{pick.overall}: {pick.name}" if pick else "No picks to undo.")
    elif args.command == "reset":
        session.reset_draft()
        print("Draft reset.")
    elif args.command == "sample":
        session.use_sample_data()
        print(f"Loaded {len(session.roster)} sample players; draft cleared.")
    elif args.command == "upcoming":
        _print_upcoming(session)
    elif args.command == "summary":
        _print_summary(session)
    elif args.command == "weights":
        if args.reset:
            session.reset_weights()
        changes = {
            name: getattr(args, name)
            for name in _WEIGHT_FIELDS
            if getattr(args, name) is not None
        }
        if changes:
            session.set_weights(**changes)
        print(session.weight_settings)
    elif args.command == "league":
        if args.reset:
            session.reset_league()
        changes = {
            k: getattr(args, k)
            for k in ("teams", "my_slot", "rounds")
            if getattr(args, k) is not None
        }
        if changes:
            session.set_league(**changes)
        print(session.league_config)
    return 0


def main() -> int:
    """Console entry point: set up logging, then run the command."""
    args = build_parser().parse_args()
    setup_logging(args.log_level)

    try:
        return execute(args)
    except Exception:
        logger.exception("Draft board command failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
