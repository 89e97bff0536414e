"""Standings table, draft order and season summary."""

from typing import List, Optional

from draft_league.data.league_data import get_teams_by_conference
from draft_league.schemas.game import Game
from draft_league.schemas.season import SeasonConfig, SeasonSummary
from draft_league.schemas.team import Conference, DraftOrderEntry, StandingRow, Team


def win_pct(team: Team, no_games: float = 0.0) -> float:
    games = team.wins + team.losses
    if games > 0:
        return team.wins / games
    return no_games


def format_pct(team: Team) -> str:
    if team.wins + team.losses > 0:
        return f"{win_pct(team):.3f}"
    return ".000"


def sort_standings(teams: List[Team], conference: Optional[Conference] = None) -> List[Team]:
    """Best record first: win percentage, then wins."""
    if conference:
        teams = get_teams_by_conference(conference, teams)
    return sorted(teams, key=lambda t: (-win_pct(t), -t.wins))


def get_standings(
    teams: List[Team], conference: Optional[Conference] = None
) -> List[StandingRow]:
    return [
        StandingRow(
            rank=i + 1,
            team=t.name,
            abbrev=t.abbrev,
            conference=t.conference,
            gm=t.gm,
            wins=t.wins,
            losses=t.losses,
            pct=win_pct(t),
            pct_display=format_pct(t),
        )
        for i, t in enumerate(sort_standings(teams, conference))
    ]


def get_draft_order(teams: List[Team]) -> List[DraftOrderEntry]:
    """Worst record gets the #1 pick. Teams with no games count as .500."""
    order = sorted(teams, key=lambda t: (win_pct(t, 0.5), t.wins))
    return [
        DraftOrderEntry(
            pick=i + 1,
            team=t.name,
            wins=t.wins,
            losses=t.losses,
            win_pct=win_pct(t, 0.5),
        )
        for i, t in enumerate(order)
    ]


def get_season_summary(
    season: SeasonConfig, teams: List[Team], schedule: List[Game]
) -> SeasonSummary:
    regular = [g for g in schedule if "Preseason" not in g.label]
    played = [g for g in regular if g.played]
    return SeasonSummary(
        season_id=season.id,
        label=season.label,
        team_count=len(teams),
        total_games=len(regular),
        played_games=len(played),
        status="In Progress" if played else "Starting Soon",
    )
