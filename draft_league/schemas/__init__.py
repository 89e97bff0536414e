# Schemas package
from draft_league.schemas.game import (
    ComputedStandings,
    Game,
    Matchup,
    ScoredGame,
    ScoredMatchup,
    TeamDelta,
)
from draft_league.schemas.scores import (
    LiveScores,
    MatchupInput,
    MatchupResult,
    ScoresRequest,
    ScoresResponse,
    StandingsDelta,
)
from draft_league.schemas.scoring import LeaderboardEntry, PlayerADP, PlayerScore
from draft_league.schemas.season import SeasonConfig, SeasonSummary, SheetGids
from draft_league.schemas.team import (
    DraftOrderEntry,
    DraftPick,
    SeasonPicks,
    StandingRow,
    Team,
    TeamDraftCapital,
)

__all__ = [
    "ComputedStandings",
    "Game",
    "Matchup",
    "ScoredGame",
    "ScoredMatchup",
    "TeamDelta",
    "LiveScores",
    "MatchupInput",
    "MatchupResult",
    "ScoresRequest",
    "ScoresResponse",
    "StandingsDelta",
    "LeaderboardEntry",
    "PlayerADP",
    "PlayerScore",
    "SeasonConfig",
    "SeasonSummary",
    "SheetGids",
    "DraftOrderEntry",
    "DraftPick",
    "SeasonPicks",
    "StandingRow",
    "Team",
    "TeamDraftCapital",
]
