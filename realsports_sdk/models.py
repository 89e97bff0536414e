"""
Real Sports SDK Response Models

Pydantic models for draft entries returned by the Real Sports API.
"""

from typing import Any, Optional

from pydantic import BaseModel


def _value(data: Optional[dict], key: str, default: Any = None) -> Any:
    """Read a key from an optional dict, treating explicit nulls as missing."""
    if not data:
        return default
    value = data.get(key)
    return default if value is None else value


class RealSportsPlayer(BaseModel):
    """A single drafted player in a lineup."""

    order: Optional[int] = None
    player_id: Optional[int] = None
    display_name: str
    first_name: str = ""
    last_name: str = ""
    multiplier: float = 1
    multiplier_display: str = "1x"
    score: float = 0
    avatar: str = ""
    team_id: int = 0
    jersey: int = 0
    background_color: str = "#333333"

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "RealSportsPlayer":
        first_name = _value(data, "firstName", "")
        last_name = _value(data, "lastName", "")
        display_name = _value(data, "displayName")
        if display_name is None:
            display_name = f"{first_name} {last_name}"

        player_id = _value(data, "playerId")
        if player_id is None:
            player_id = _value(data, "id")

        return cls(
            order=_value(data, "order"),
            player_id=player_id,
            display_name=display_name,
            first_name=first_name,
            last_name=last_name,
            multiplier=_value(data, "multiplier", 1),
            multiplier_display=_value(data, "multiplierDisplay", "1x"),
            score=_value(data, "score", 0),
            avatar=_value(data, "avatar", ""),
            team_id=_value(data, "teamId", 0),
            jersey=_value(data, "jersey", 0),
            background_color=_value(data, "backgroundColor", "#333333"),
        )


class RealSportsDraft(BaseModel):
    """A user's draft entry for one contest (game day)."""

    contest_id: int
    contest_day: str = ""
    sport: str = "nba"
    is_finalized: bool = False
    lineup_size: int = 5
    user_name: str = ""
    user_id: str = ""
    lineup: list[RealSportsPlayer] = []
    total_score: float = 0

    @classmethod
    def from_api(cls, data: dict[str, Any], draft_id: int) -> "RealSportsDraft":
        """
        Map a raw `/playerratingcontest/{id}/view/{code}` response.

        Args:
            data: Decoded JSON body
            draft_id: The contest ID that was requested, used when the
                response does not echo it back

        Returns:
            The draft with its total score summed over the lineup
        """
        info = _value(data, "info", {})
        contest = _value(info, "contest", {})
        additional = _value(contest, "additionalInfo", {})
        user = _value(info, "user", {})

        lineup = [
            RealSportsPlayer.from_api(p) for p in (_value(data, "lineup", []))
        ]

        return cls(
            contest_id=_value(contest, "id", draft_id),
            contest_day=_value(contest, "day", ""),
            sport=_value(contest, "sport", "nba"),
            is_finalized=_value(contest, "isFinalized", False),
            lineup_size=_value(additional, "lineupSize", 5),
            user_name=_value(user, "userName", ""),
            user_id=str(_value(info, "userId", "")),
            lineup=lineup,
            total_score=sum(p.score for p in lineup),
        )
