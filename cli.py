"""CFP Dynasty Ledger - CLI entry point.

Usage:
    python cli.py seeds [--file seeds.json|seeds.csv | --interactive] [--force]
    python cli.py record --round quarterfinals --team1 OSU --score1 31 --team2 TEX --score2 24
    python cli.py import-round --round semifinals [--file games.csv | --sheet-id ID [--gid 0] [--save-raw]]
    python cli.py show [--teams teams.csv]
    python cli.py path [--seed 5 | --team OSU]
    python cli.py next

Global options (before the command): --dynasty, --year, --team, --data-dir
"""

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import requests

import config
from models.game import Game, normalize_team
from store.season_store import (
    SeasonContext,
    SeasonPlayoffStore,
    document_path,
    load_document,
    save_document,
)


def open_season(args):
    """Load the dynasty document and work out the season context."""
    path = document_path(args.data_dir, args.dynasty)
    document = load_document(path, args.dynasty)

    if args.year is not None:
        document["currentYear"] = args.year
    if args.team:
        document["teamName"] = normalize_team(args.team)

    year = document.get("currentYear")
    if year is None:
        raise ValueError("No season year set. Pass --year the first time.")

    context = SeasonContext(dynasty_id=args.dynasty, user_team=document.get("teamName"), year=int(year))
    return path, document, SeasonPlayoffStore(document), context


def _load_teams(args):
    if not getattr(args, "teams", None):
        return None
    from ingestion.manual_entry import load_teams_from_csv
    return load_teams_from_csv(args.teams)


# --- Commands ---

def cmd_seeds(args):
    """Set the season's 12 playoff seeds."""
    path, document, store, context = open_season(args)

    if args.file and args.file.lower().endswith(".csv"):
        from ingestion.manual_entry import load_seeds_from_csv
        seeds = load_seeds_from_csv(args.file)
    elif args.file:
        from ingestion.seed_loader import load_seeds_from_json
        seeds = load_seeds_from_json(args.file)
    else:
        from ingestion.seed_loader import load_seeds_interactive
        seeds = load_seeds_interactive()

    if not seeds.is_complete():
        print(f"WARNING: only {len(seeds)} of {config.NUM_SEEDS} seeds entered.")

    store.set_seeds(context.year, seeds, force=args.force)
    save_document(path, document)
    print(f"\nSaved {len(seeds)} seeds for {context.year}")


def cmd_record(args):
    """Record a single game result."""
    path, document, store, context = open_season(args)

    game = Game(
        team1=args.team1,
        team2=args.team2,
        team1_score=args.score1,
        team2_score=args.score2,
        bowl_name=args.bowl,
    )
    recorded = store.record_game(context, args.round, game)
    save_document(path, document)
    print(f"\nRecorded {config.ROUND_NAMES[args.round]}: {recorded} ({recorded.bowl_name or 'no bowl'})")


def cmd_import_round(args):
    """Bulk import a round's results from a CSV file or Google Sheet."""
    path, document, store, context = open_season(args)

    if args.file:
        from ingestion.round_loader import load_round_from_csv
        imported = load_round_from_csv(args.file)
    elif args.sheet_id:
        from ingestion.round_loader import fetch_sheet_round, parse_round_games
        imported = parse_round_games(fetch_sheet_round(args.sheet_id, gid=args.gid, save=args.save_raw))
    else:
        print("ERROR: Pass --file or --sheet-id.")
        return 1

    merged = store.import_round(context, args.round, imported)
    save_document(path, document)

    print(f"\nSaved {len(merged)} {config.ROUND_NAMES[args.round]} games for {context.year}")
    if len(merged) > config.GAMES_PER_ROUND[args.round]:
        print(f"WARNING: a round normally has at most {config.GAMES_PER_ROUND[args.round]} games.")


def cmd_show(args):
    """Display the bracket."""
    _, _, store, context = open_season(args)
    resolver = store.resolver(context.year)
    if not resolver.seeds:
        print("ERROR: No seeds set. Run 'python cli.py seeds' first.")
        return 1

    from output.printer import print_bracket
    print_bracket(resolver, _load_teams(args))


def cmd_path(args):
    """Display a seed's path through the bracket."""
    _, _, store, context = open_season(args)
    resolver = store.resolver(context.year)

    seed = args.seed
    if seed is None:
        team = normalize_team(args.path_team or context.user_team)
        seed = resolver.seeds.seed_for(team)
        if seed is None:
            print(f"ERROR: {team or 'No team'} is not seeded in {context.year}.")
            return 1

    from output.printer import print_path
    print_path(resolver, seed, _load_teams(args))


def cmd_next(args):
    """Show the user's next playoff game to enter."""
    _, _, store, context = open_season(args)
    if not context.user_team:
        print("ERROR: No user team set. Pass --team.")
        return 1

    resolver = store.resolver(context.year)
    if resolver.seeds.seed_for(context.user_team) is None:
        print(f"{context.user_team} is not in the {context.year} playoff.")
        return

    from output.printer import print_next_task
    print_next_task(resolver.next_task(context.user_team), context.user_team, _load_teams(args))


# --- Main ---

def build_parser():
    parser = argparse.ArgumentParser(
        description="College Football Playoff dynasty ledger",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Workflow:
  1. python cli.py --year 2025 --team OSU seeds --file seeds.json  # Enter the 12 seeds
  2. python cli.py import-round --round firstRound --file fr.csv   # Bulk import CPU results
  3. python cli.py record --round quarterfinals --team1 OSU ...     # Enter your own game
  4. python cli.py next                                             # What to enter next
  5. python cli.py show                                             # Full bracket
        """
    )
    parser.add_argument("--data-dir", default=config.DATA_DIR, help="Directory holding dynasty documents")
    parser.add_argument("--dynasty", default=config.DEFAULT_DYNASTY_ID, help="Dynasty id")
    parser.add_argument("--year", type=int, help="Season year (remembered once set)")
    parser.add_argument("--team", help="Your team's code (remembered once set)")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # seeds
    p_seeds = subparsers.add_parser("seeds", help="Set the playoff seeds")
    p_seeds.add_argument("--file", help="JSON or CSV file with seeds")
    p_seeds.add_argument("--interactive", action="store_true", help="Enter seeds interactively")
    p_seeds.add_argument("--force", action="store_true", help="Replace seeds even after games are recorded")

    # record
    p_record = subparsers.add_parser("record", help="Record a single game")
    p_record.add_argument("--round", choices=config.ROUND_KEYS, required=True)
    p_record.add_argument("--team1", required=True)
    p_record.add_argument("--score1", type=int, required=True)
    p_record.add_argument("--team2", required=True)
    p_record.add_argument("--score2", type=int, required=True)
    p_record.add_argument("--bowl", help="Bowl name (inferred from seeds if omitted)")

    # import-round
    p_import = subparsers.add_parser("import-round", help="Bulk import a round's results")
    p_import.add_argument("--round", choices=config.ROUND_KEYS, required=True)
    p_import.add_argument("--file", help="CSV file with the round's games")
    p_import.add_argument("--sheet-id", help="Google Sheet id (shared by link)")
    p_import.add_argument("--gid", type=int, default=0, help="Sheet tab id")
    p_import.add_argument("--save-raw", action="store_true", help="Keep the downloaded CSV in data/raw/")

    # show
    p_show = subparsers.add_parser("show", help="Display the bracket")
    p_show.add_argument("--teams", help="CSV file with team display names")

    # path
    p_path = subparsers.add_parser("path", help="Display a seed's path")
    p_path.add_argument("--seed", type=int)
    p_path.add_argument("--team", dest="path_team", help="Team code (defaults to your team)")
    p_path.add_argument("--teams", help="CSV file with team display names")

    # next
    subparsers.add_parser("next", help="Show your next playoff game to enter")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "seeds": cmd_seeds,
        "record": cmd_record,
        "import-round": cmd_import_round,
        "show": cmd_show,
        "path": cmd_path,
        "next": cmd_next,
    }

    try:
        return commands[args.command](args) or 0
    except (ValueError, KeyError, OSError, requests.RequestException) as e:
        print(f"ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
