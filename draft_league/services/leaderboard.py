import logging
from typing import Dict, List

from draft_league.schemas.game import Game
from draft_league.schemas.scoring import LeaderboardEntry, PlayerADP, PlayerScore

logger = logging.getLogger(__name__)


def get_game_player_scores(game: Game) -> List[PlayerScore]:
    """Every starter's score for one game day. A missing score counts as 0."""
    scores = []
    for m in game.matchups:
        for team, starters, starter_scores in (
            (m.away, m.away_starters, m.away_starter_scores),
            (m.home, m.home_starters, m.home_starter_scores),
        ):
            if not starters or starter_scores is None:
                continue
            for i, player in enumerate(starters):
                scores.append(
                    PlayerScore(
                        player=player,
                        team=team,
                        game_day=game.label,
                        score=starter_scores[i] if i < len(starter_scores) else 0,
                    )
                )
    return scores


def get_all_player_scores(schedule: List[Game]) -> List[PlayerScore]:
    """Starter scores across all played game days."""
    scores = []
    for game in schedule:
        if game.played:
            scores.extend(get_game_player_scores(game))
    return scores


def rank_scores(scores: List[PlayerScore]) -> List[LeaderboardEntry]:
    ranked = sorted(scores, key=lambda s: s.score, reverse=True)
    return [
        LeaderboardEntry(**s.model_dump(), position=i + 1) for i, s in enumerate(ranked)
    ]


def get_game_day_leaderboard(schedule: List[Game], game_day_label: str) -> List[LeaderboardEntry]:
    """Leaderboard for one game day, highest score first."""
    for game in schedule:
        if game.label == game_day_label:
            return rank_scores(get_game_player_scores(game))
    return []


def get_player_adp(schedule: List[Game]) -> List[PlayerADP]:
    """
    Average score and average leaderboard position per player.

    Players are ranked within each played game day; ADP is the mean of a
    player's positions, lower is better.
    """
    by_day: Dict[str, List[PlayerScore]] = {}
    for s in get_all_player_scores(schedule):
        by_day.setdefault(s.game_day, []).append(s)

    players: Dict[str, Dict] = {}
    for day_scores in by_day.values():
        for entry in rank_scores(day_scores):
            data = players.setdefault(
                entry.player, {"team": entry.team, "scores": [], "positions": []}
            )
            data["scores"].append(entry.score)
            data["positions"].append(entry.position)

    results = [
        PlayerADP(
            player=player,
            team=data["team"],
            games_played=len(data["scores"]),
            avg_score=sum(data["scores"]) / len(data["scores"]),
            adp=sum(data["positions"]) / len(data["positions"]),
        )
        for player, data in players.items()
    ]
    results.sort(key=lambda r: r.adp)
    logger.debug(f"Computed ADP for {len(results)} players over {len(by_day)} game days")
    return results
