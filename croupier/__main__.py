"""Croupier CLI entry point."""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

load_dotenv()

from croupier import __version__
from croupier.config import get_settings
from croupier.console import Console, format_totals
from croupier.roster import load_roster
from croupier.session import run_session
from croupier.table.exceptions import EmptyRosterError, RosterLoadError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

CONFIG_TEMPLATE = """# Croupier Configuration
# Secrets (LOGFIRE_TOKEN) belong in .env, not here.

table:
  round_interval_seconds: 30
  seed: null

roster:
  path: players.txt
  delimiter: ","

console:
  sentinel: end
"""

PLAYERS_TEMPLATE = """# name[,total_won[,total_wagered]]
Tiki_Monkey,1,2
Barbara
"""


def _init_logfire() -> None:
    """Initialize Logfire if available, without failing commands."""
    try:
        from croupier.observability import initialize_logfire

        initialize_logfire(get_settings())
    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")


def cmd_init(args: argparse.Namespace) -> int:
    """Initialize data directory with configuration and roster files."""
    data_dir = Path(args.data_dir).resolve()

    try:
        data_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Created data directory: {data_dir}")

        for name, template in [("config.yaml", CONFIG_TEMPLATE), ("players.txt", PLAYERS_TEMPLATE)]:
            path = data_dir / name
            if path.exists():
                logger.info(f"File already exists: {path}")
                continue
            path.write_text(template, encoding="utf-8")
            logger.info(f"Created template: {path}")

        print(f"\n✓ Data directory initialized at {data_dir}")
        print("\nNext steps:")
        print("1. Add your players to players.txt")
        print("2. Review data/config.yaml (round interval, seed)")
        print("3. Run 'python -m croupier play' to open the table\n")
        return 0

    except OSError as e:
        logger.error(f"Failed to initialize: {e}")
        print(f"\n❌ Initialization failed: {e}\n")
        return 1


def cmd_config(args: argparse.Namespace) -> int:
    """Display merged configuration."""
    try:
        settings = get_settings()

        print("\n=== Croupier Configuration ===\n")
        print(f"Data Directory: {settings.data_dir}")
        print(f"Environment: {settings.environment}\n")

        print("Table:")
        print(f"  Round Interval: {settings.table.round_interval_seconds:g}s")
        print(f"  Seed: {settings.table.seed if settings.table.seed is not None else 'random'}\n")

        print("Roster:")
        print(f"  Path: {settings.roster_path}")
        print(f"  Delimiter: '{settings.roster.delimiter}'\n")

        print("Console:")
        print(f"  Sentinel: {settings.console.sentinel}\n")

        print("API Keys:")
        print(f"  Logfire: {'✓ Set' if settings.logfire_token else '✗ Not set'}\n")

        return 0

    except ValidationError as e:
        print("\n❌ Configuration Error:\n")
        for error in e.errors():
            print(f"  • {'.'.join(str(x) for x in error['loc'])}: {error['msg']}")
        print()
        return 1
    except Exception as e:
        logger.error(f"Failed to load config: {e}")
        print(f"\n❌ Failed to load configuration: {e}\n")
        return 1


def cmd_roster(args: argparse.Namespace) -> int:
    """Display the loaded roster and starting totals."""
    try:
        settings = get_settings()
        registry = load_roster(settings.roster_path, settings.roster.delimiter)

        print(f"\n=== Roster ({len(registry)} players) ===\n")
        if not registry:
            print("  (None)\n")
            return 1
        print("\n".join(format_totals(registry.totals())))
        print()
        return 0

    except RosterLoadError as e:
        print(f"\n❌ {e}")
        print("Run 'python -m croupier init' to create a roster.\n")
        return 1


def cmd_play(args: argparse.Namespace) -> int:
    """Open the table on stdin/stdout."""
    try:
        _init_logfire()

        if args.debug:
            logging.getLogger().setLevel(logging.DEBUG)

        settings = get_settings()
        if args.interval is not None:
            settings.table.round_interval_seconds = args.interval
        if args.seed is not None:
            settings.table.seed = args.seed

        print("\n=== Croupier Roulette Table ===\n")
        print(f"Version: {__version__}")
        print(f"Round Interval: {settings.table.round_interval_seconds:g}s")
        print(f"Roster: {settings.roster_path}\n")

        console = Console(sys.stdout, prompt=settings.console.prompt)
        summary = run_session(settings, sys.stdin, console)

        print(f"\n✓ Table closed after {summary.rounds_resolved} rounds")
        print(f"Bets placed: {summary.bets_placed}")
        print(f"Bets rejected: {summary.bets_rejected}")
        if summary.unresolved_bets:
            print(f"Unresolved at close: {summary.unresolved_bets}")
        print()
        return 0

    except RosterLoadError as e:
        logger.error(f"Roster load failed: {e}")
        print(f"\n❌ {e}\n")
        return 1
    except EmptyRosterError as e:
        logger.error(str(e))
        print(f"\n❌ {e}\n")
        return 1
    except Exception as e:
        logger.error(f"Failed to run table: {e}", exc_info=True)
        print(f"\n❌ Failed to run table: {e}\n")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Croupier: single-table roulette with timed round resolution",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Croupier {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_init = subparsers.add_parser(
        "init",
        help="Initialize data directory, config and roster files",
    )
    parser_init.add_argument(
        "--data-dir",
        default="data",
        help="Directory to initialize (default: data)",
    )
    parser_init.set_defaults(func=cmd_init)

    parser_config = subparsers.add_parser(
        "config",
        help="Display merged configuration",
    )
    parser_config.set_defaults(func=cmd_config)

    parser_roster = subparsers.add_parser(
        "roster",
        help="Display loaded players and their totals",
    )
    parser_roster.set_defaults(func=cmd_roster)

    parser_play = subparsers.add_parser(
        "play",
        help="Open the table and accept bets from stdin",
    )
    parser_play.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser_play.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Seconds between round resolutions (overrides config)",
    )
    parser_play.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the wheel for a reproducible session",
    )
    parser_play.set_defaults(func=cmd_play)

    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
