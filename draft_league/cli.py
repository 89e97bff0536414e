#!/usr/bin/env python3
"""
CLI for the Draft League.

Usage:
    draft-league seasons                              # List seasons
    draft-league teams --conference East              # Teams and rosters
    draft-league standings --season 1                 # Standings from the sheet
    draft-league standings --conference West --live   # Standings with live scoring
    draft-league schedule                             # Game days and results
    draft-league draft-order                          # Draft order, worst first
    draft-league adp                                  # Player ADP table
    draft-league leaderboard --game-day "Game 7"      # One game day's leaderboard
    draft-league draft --draft-id 1442 --code xnrW4GxJ  # Fetch one draft
    draft-league scores                               # Score drafts for the season
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from draft_league.api.deps import get_real_sports_client
from draft_league.data.league_data import get_team_color
from draft_league.data.seasons import get_season_config, get_seasons
from draft_league.schemas.team import Team
from draft_league.services.leaderboard import get_game_day_leaderboard, get_player_adp
from draft_league.services.score_calculator import calculate_scores, merge_standings
from draft_league.services.sheets import fetch_season_data
from draft_league.services.standings import get_draft_order, get_standings
from realsports_sdk import RealSportsClientError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _print_standings(teams: List[Team], conference: Optional[str]) -> None:
    print(f"\n{'#':>2}  {'Team':<14}{'W':>3}{'L':>4}{'PCT':>8}  GM")
    for row in get_standings(teams, conference):
        print(
            f"{row.rank:>2}  {row.team:<14}{row.wins:>3}{row.losses:>4}"
            f"{row.pct_display:>8}  {row.gm}"
        )


async def run_command(args: argparse.Namespace) -> int:
    """Run a CLI command."""
    if args.command == "seasons":
        for season in get_seasons():
            state = "locked" if season.locked else "open"
            print(f"{season.id}: {season.label} ({state}) - {season.description}")
        return 0

    if args.command == "draft":
        if not args.draft_id or not args.code:
            print("Error: --draft-id and --code are required for the draft command")
            return 1
        client = get_real_sports_client()
        try:
            draft = await client.get_draft(args.draft_id, args.code)
        except RealSportsClientError as e:
            print(f"❌ {e}")
            return 1
        print(f"\n{draft.user_name} - contest {draft.contest_id} ({draft.sport}, {draft.contest_day})")
        for player in draft.lineup:
            print(f"   {player.display_name:<24}{player.multiplier_display:>6}{player.score:>8g}")
        print(f"   {'Total':<30}{draft.total_score:>8g}")
        return 0

    season = get_season_config(args.season)
    if not season:
        print(f"Error: unknown season {args.season}")
        return 1
    if season.locked:
        print(f"Error: {season.label} is locked")
        return 1

    data = await fetch_season_data(season)

    if args.command == "standings":
        teams = data.teams
        if args.live:
            _, new_wins = await calculate_scores(data.schedule, get_real_sports_client())
            teams = merge_standings(teams, new_wins)
        _print_standings(teams, args.conference)

    elif args.command == "teams":
        for team in data.teams:
            if args.conference and team.conference != args.conference:
                continue
            print(
                f"\n{team.name} ({team.abbrev}, {team.conference}) "
                f"{get_team_color(team.name)} - GM {team.gm}"
            )
            for player in team.roster:
                print(f"   {player}")

    elif args.command == "schedule":
        for game in data.schedule:
            status = "played" if game.played else "upcoming"
            print(f"\n{game.label} - {game.date} [{game.sport}] ({status})")
            for m in game.matchups:
                score = ""
                if m.away_score is not None and m.home_score is not None:
                    score = f"  {m.away_score:g}-{m.home_score:g}"
                print(f"   {m.away} @ {m.home}{score}")

    elif args.command == "draft-order":
        for entry in get_draft_order(data.teams):
            print(f"{entry.pick:>2}. {entry.team} ({entry.wins}-{entry.losses})")

    elif args.command == "adp":
        adp = get_player_adp(data.schedule)
        if not adp:
            print("No game day scores yet.")
        for i, entry in enumerate(adp):
            print(
                f"{i + 1:>3}. {entry.player:<24}{entry.team:<14}"
                f"GP {entry.games_played:>2}  AVG {entry.avg_score:>6.1f}  ADP {entry.adp:>5.1f}"
            )

    elif args.command == "leaderboard":
        if not args.game_day:
            print("Error: --game-day is required for the leaderboard command")
            return 1
        for entry in get_game_day_leaderboard(data.schedule, args.game_day):
            print(f"{entry.position:>3}. {entry.player:<24}{entry.team:<14}{entry.score:>8g}")

    elif args.command == "scores":
        scored, new_wins = await calculate_scores(data.schedule, get_real_sports_client())
        for game in scored:
            for m in game.matchups:
                if m.winner is None:
                    continue
                note = f" (forfeit: {m.forfeit})" if m.forfeit else ""
                note += f" (DQ: {m.dq})" if m.dq else ""
                print(
                    f"{game.label}: {m.away} {m.away_score:g} @ {m.home} {m.home_score:g}"
                    f" -> {m.winner}{note}"
                )
        print(f"\n✅ New results for {len(new_wins)} teams")
        for team, delta in sorted(new_wins.items()):
            print(
                f"   {team:<14}+{delta.wins}W +{delta.losses}L "
                f"PF {delta.points_for:g} PA {delta.points_against:g}"
            )

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="NBA Draft League - standings, schedule and live scoring",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "command",
        choices=[
            "seasons",
            "teams",
            "standings",
            "schedule",
            "draft-order",
            "adp",
            "leaderboard",
            "draft",
            "scores",
        ],
        help="Command to run",
    )

    parser.add_argument(
        "--season",
        type=int,
        default=1,
        help="Season ID (default: 1)",
    )

    parser.add_argument(
        "--conference",
        choices=["West", "East"],
        help="Only show one conference in teams and standings",
    )

    parser.add_argument(
        "--live",
        action="store_true",
        help="Add results scored from Real Sports drafts to the standings",
    )

    parser.add_argument(
        "--game-day",
        help="Game day label for the leaderboard command (e.g. 'Game 7')",
    )

    parser.add_argument(
        "--draft-id",
        type=int,
        help="Real Sports contest ID for the draft command (e.g. 1442)",
    )

    parser.add_argument(
        "--code",
        help="User draft code for the draft command (e.g. xnrW4GxJ)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        return asyncio.run(run_command(args))
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Command failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
