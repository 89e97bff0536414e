"""
Batch scoring for submitted matchups.

Takes matchups with a draft ID and draft codes, fetches each draft from
the Real Sports API, totals the player scores per team, determines the
winners and returns the results with a standings delta.
"""

import logging
from typing import Dict, List, Optional

from draft_league.core.config import settings
from draft_league.schemas.scores import (
    MatchupInput,
    MatchupResult,
    ScoresResponse,
    StandingsDelta,
)
from draft_league.services.score_calculator import fetch_pair, pick_winner, run_in_batches
from realsports_sdk import RealSportsClient, is_dq, is_forfeit

logger = logging.getLogger(__name__)


async def score_submitted_matchup(
    client: RealSportsClient, matchup: MatchupInput
) -> MatchupResult:
    result = MatchupResult(
        game_label=matchup.game_label, home=matchup.home, away=matchup.away
    )

    # Forfeits get a symbolic 1-0 result
    if is_forfeit(matchup.home_draft_code):
        result.forfeit = "home"
        result.home_score, result.away_score = 0, 1
        result.winner = "away"
        return result
    if is_forfeit(matchup.away_draft_code):
        result.forfeit = "away"
        result.home_score, result.away_score = 1, 0
        result.winner = "home"
        return result

    home_dq = is_dq(matchup.home_draft_code)
    away_dq = is_dq(matchup.away_draft_code)
    if home_dq:
        result.dq = "home"
    if away_dq:
        result.dq = "away"

    home_draft, away_draft = await fetch_pair(
        client,
        matchup.draft_id,
        None if home_dq else matchup.home_draft_code,
        None if away_dq else matchup.away_draft_code,
    )

    if home_draft:
        result.home_score = home_draft.total_score
    elif home_dq:
        result.home_score = 0

    if away_draft:
        result.away_score = away_draft.total_score
    elif away_dq:
        result.away_score = 0

    if result.home_score is not None and result.away_score is not None:
        result.winner = pick_winner(result.home_score, result.away_score)

    return result


def compute_standings(results: List[MatchupResult]) -> Dict[str, StandingsDelta]:
    """Wins, losses, points for and points against from scored results."""
    standings: Dict[str, StandingsDelta] = {}

    for r in results:
        if r.home_score is None and r.away_score is None:
            continue

        home = standings.setdefault(r.home, StandingsDelta())
        away = standings.setdefault(r.away, StandingsDelta())

        if r.home_score is not None:
            home.pf += r.home_score
            away.pa += r.home_score
        if r.away_score is not None:
            away.pf += r.away_score
            home.pa += r.away_score

        if r.winner == "home":
            home.wins += 1
            away.losses += 1
        elif r.winner == "away":
            away.wins += 1
            home.losses += 1

    return standings


async def score_matchups(
    matchups: List[MatchupInput],
    client: RealSportsClient,
    batch_size: Optional[int] = None,
) -> ScoresResponse:
    """
    Score submitted matchups in sequential batches.

    Args:
        matchups: Matchups to score
        client: Real Sports client used for draft lookups
        batch_size: Matchups per concurrent batch, defaults to SCORES_BATCH_SIZE

    Returns:
        Per-matchup results and the standings delta
    """
    if not matchups:
        return ScoresResponse()

    results = await run_in_batches(
        matchups,
        lambda m: score_submitted_matchup(client, m),
        batch_size or settings.SCORES_BATCH_SIZE,
    )
    logger.info(f"Scored {len(results)} submitted matchups")
    return ScoresResponse(results=results, standings=compute_standings(results))
