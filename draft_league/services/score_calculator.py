"""
Automatic score calculator.

For each matchup that has draft codes (HomeLink / AwayLink in the sheet),
fetches the Real Sports drafts, totals them, picks the winner and
accumulates the standings delta.

The sheet's Standings tab holds the baseline W/L for games scored by
hand; only matchups scored here (fetched drafts, forfeits, DQs) are added
on top of it.

Special markers in the draft code fields:
    FORFEIT: the forfeiting team loses, its opponent gets the win
    DQ: the disqualified team scores 0 for that matchup
"""

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple, TypeVar

from draft_league.core.config import settings
from draft_league.schemas.game import (
    ComputedStandings,
    Game,
    Matchup,
    ScoredGame,
    ScoredMatchup,
    TeamDelta,
    Winner,
)
from draft_league.schemas.team import Team
from realsports_sdk import RealSportsClient, RealSportsDraft, is_dq, is_forfeit

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


async def run_in_batches(
    items: Sequence[T],
    func: Callable[[T], Awaitable[R]],
    batch_size: int,
) -> List[R]:
    """Run func over items, at most batch_size at a time, keeping input order."""
    batch_size = max(1, batch_size)
    results: List[R] = []
    for start in range(0, len(items), batch_size):
        batch = items[start : start + batch_size]
        results.extend(await asyncio.gather(*(func(item) for item in batch)))
    return results


def pick_winner(home: float, away: float) -> Winner:
    if home > away:
        return "home"
    if away > home:
        return "away"
    return "tie"


async def fetch_pair(
    client: RealSportsClient,
    draft_id: int,
    home_code: Optional[str],
    away_code: Optional[str],
) -> Tuple[Optional[RealSportsDraft], Optional[RealSportsDraft]]:
    """Fetch both sides' drafts concurrently, skipping missing codes."""

    async def fetch(code: Optional[str]) -> Optional[RealSportsDraft]:
        if not code:
            return None
        return await client.fetch_draft_entry(draft_id, code)

    home_draft, away_draft = await asyncio.gather(fetch(home_code), fetch(away_code))
    return home_draft, away_draft


async def score_matchup(client: RealSportsClient, matchup: Matchup) -> ScoredMatchup:
    scored = ScoredMatchup(**matchup.model_dump())

    home_code = matchup.home_draft_code
    away_code = matchup.away_draft_code

    if is_forfeit(home_code) or is_forfeit(away_code):
        forfeit_side = "home" if is_forfeit(home_code) else "away"
        scored.forfeit = forfeit_side
        scored.home_score = 0 if forfeit_side == "home" else 1
        scored.away_score = 0 if forfeit_side == "away" else 1
        scored.winner = "away" if forfeit_side == "home" else "home"
        return scored

    # Scores entered in the sheet win over the API
    if matchup.home_score is not None and matchup.away_score is not None:
        scored.home_total = matchup.home_score
        scored.away_total = matchup.away_score
        scored.winner = pick_winner(matchup.home_score, matchup.away_score)
        return scored

    if not matchup.draft_id or not (home_code or away_code):
        return scored

    home_dq = is_dq(home_code)
    away_dq = is_dq(away_code)
    if home_dq:
        scored.dq = "home"
    if away_dq:
        scored.dq = "away"

    home_draft, away_draft = await fetch_pair(
        client,
        matchup.draft_id,
        None if home_dq else home_code,
        None if away_dq else away_code,
    )

    if home_draft:
        scored.home_total = scored.home_score = home_draft.total_score
        scored.home_draft_fetched = True
    elif home_dq:
        scored.home_total = scored.home_score = 0

    if away_draft:
        scored.away_total = scored.away_score = away_draft.total_score
        scored.away_draft_fetched = True
    elif away_dq:
        scored.away_total = scored.away_score = 0

    if scored.home_total is not None and scored.away_total is not None:
        scored.winner = pick_winner(scored.home_total, scored.away_total)

    return scored


def accumulate_results(new_wins: ComputedStandings, matchups: List[ScoredMatchup]) -> None:
    """Add API-scored, forfeited and DQ'd matchups to the standings delta."""
    for m in matchups:
        scored_here = m.home_draft_fetched or m.away_draft_fetched or m.forfeit or m.dq
        if not scored_here:
            continue
        if m.home_total is None and m.away_total is None and not m.forfeit:
            continue

        home = new_wins.setdefault(m.home, TeamDelta())
        away = new_wins.setdefault(m.away, TeamDelta())

        if m.home_total is not None:
            home.points_for += m.home_total
            away.points_against += m.home_total
        if m.away_total is not None:
            away.points_for += m.away_total
            home.points_against += m.away_total

        if m.winner == "home":
            home.wins += 1
            away.losses += 1
        elif m.winner == "away":
            away.wins += 1
            home.losses += 1


async def calculate_scores(
    schedule: List[Game],
    client: RealSportsClient,
    batch_size: Optional[int] = None,
) -> Tuple[List[ScoredGame], ComputedStandings]:
    """
    Score every matchup in a schedule.

    Matchups with a forfeit marker or sheet scores are resolved locally;
    matchups with a draft ID and at least one draft code are fetched.

    Args:
        schedule: The season schedule
        client: Real Sports client used for draft lookups
        batch_size: Matchups scored concurrently per game, defaults to
            SCORES_BATCH_SIZE

    Returns:
        The scored schedule and the standings delta from newly scored games
        (preseason games excluded)
    """
    batch_size = batch_size or settings.SCORES_BATCH_SIZE
    new_wins: ComputedStandings = {}
    scored_schedule: List[ScoredGame] = []

    for game in schedule:
        matchups = await run_in_batches(
            game.matchups, lambda m: score_matchup(client, m), batch_size
        )

        if not game.is_preseason:
            accumulate_results(new_wins, matchups)

        has_any_scores = any(
            m.home_total is not None and m.away_total is not None for m in matchups
        )
        scored_schedule.append(
            ScoredGame(
                id=game.id,
                label=game.label,
                date=game.date,
                sport=game.sport,
                matchups=matchups,
                played=has_any_scores or game.played,
            )
        )

    fetched = sum(
        m.home_draft_fetched + m.away_draft_fetched
        for g in scored_schedule
        for m in g.matchups
    )
    logger.info(
        f"Scored {len(scored_schedule)} games ({fetched} drafts fetched), "
        f"{len(new_wins)} teams with new results"
    )
    return scored_schedule, new_wins


def merge_standings(teams: List[Team], new_wins: ComputedStandings) -> List[Team]:
    """
    Add newly computed wins/losses on top of the sheet baseline.

    Teams without new wins or losses are returned unchanged.
    """
    merged = []
    for team in teams:
        delta: Optional[TeamDelta] = new_wins.get(team.name)
        if not delta or (delta.wins == 0 and delta.losses == 0):
            merged.append(team)
            continue
        merged.append(
            team.model_copy(
                update={
                    "wins": team.wins + delta.wins,
                    "losses": team.losses + delta.losses,
                }
            )
        )
    return merged
