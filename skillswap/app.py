"""SkillSwap command-line entry point: browse ranked matches for a user."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from rich.text import Text

from skillswap.config import DEFAULT_USERS_PATH, load_scoring_config, load_users
from skillswap.matching.matcher import MatchFinder, SortOrder, sort_matches
from skillswap.matching.scorer import MatchResult
from skillswap.matching.validation import MatchValidationError

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "SKILLSWAP_LOG_LEVEL"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure application logging."""
    root_logger = logging.getLogger()
    level_name = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    root_logger.setLevel(getattr(logging, level_name, logging.WARNING))

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    has_stream_handler = any(
        type(handler) is logging.StreamHandler for handler in root_logger.handlers
    )
    if not has_stream_handler:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)


def _score_style(score: int) -> str:
    if score >= 75:
        return "bold green"
    if score >= 50:
        return "yellow"
    return "red"


def render_matches(matches: List[MatchResult], console: Console, title: str = "Matches") -> None:
    """Print matches as a ranked table."""
    if not matches:
        console.print("[dim]No matches found.[/dim]")
        return

    table = Table(title=title, show_lines=True)
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Score", justify="right")
    table.add_column("Skill / Loc / Exp / Rating", justify="center")
    table.add_column("Why")

    for rank, match in enumerate(matches, 1):
        b = match.breakdown
        table.add_row(
            str(rank),
            match.user.name,
            Text(str(match.score), style=_score_style(match.score)),
            f"{b.skill_complement_score} / {b.location_score} / "
            f"{b.experience_level_score} / {b.rating_score}",
            "\n".join(match.match_reasons),
        )

    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skillswap-match",
        description="Rank skill-exchange partners for a user.",
    )
    parser.add_argument(
        "users_file",
        nargs="?",
        type=Path,
        default=DEFAULT_USERS_PATH,
        help="YAML file with the user pool (default: data/users.yaml)",
    )
    parser.add_argument("--user", "-u", required=True, help="ID of the user to find matches for")
    parser.add_argument("--config", "-c", type=Path, default=None, help="Scoring config YAML")
    parser.add_argument("--limit", "-n", type=int, default=None, help="Maximum matches to show")
    parser.add_argument(
        "--sort",
        choices=[order.value for order in SortOrder],
        default=SortOrder.SCORE.value,
        help="Ordering of the results",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--log-level", default=None, help="Logging level (default: WARNING)")
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """Entry point for the application."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    console = console or Console()

    try:
        users = load_users(args.users_file)
        config = load_scoring_config(args.config)
    except FileNotFoundError as e:
        console.print(f"[red]File not found:[/red] {e.filename}")
        return 2
    except ValidationError as e:
        console.print(f"[red]Invalid input:[/red] {e.error_count()} validation error(s)")
        logger.error(str(e))
        return 2

    current = next((u for u in users if u.id == args.user), None)
    if current is None:
        console.print(f"[red]Unknown user:[/red] {args.user}")
        return 2

    try:
        matches = MatchFinder(config).find_matches(current, users, limit=args.limit)
    except MatchValidationError as e:
        console.print(f"[red]Invalid user data:[/red] {e}")
        return 2

    matches = sort_matches(matches, SortOrder(args.sort))

    if args.json:
        console.print_json(json.dumps([m.to_dict() for m in matches]))
    else:
        render_matches(matches, console, title=f"Matches for {current.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
