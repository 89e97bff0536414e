"""
Season registry.

Each season has its own published Google Sheet with Standings, Schedule
and Rosters tabs. Set locked=False when a season begins, and fill in
sheet_base_url and the tab GIDs to pull live data from the sheet.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter

from draft_league.core.config import settings
from draft_league.schemas.season import SeasonConfig, SheetGids

logger = logging.getLogger(__name__)

DEFAULT_SEASONS: List[SeasonConfig] = [
    SeasonConfig(
        id=1,
        label="Season 1",
        locked=False,
        description="The inaugural NBA Draft League season",
        # Sheet integration is off until the GIDs of each tab are filled in
        sheet_base_url="",
        gids=SheetGids(standings=0, schedule=0, rosters=0),
    ),
    SeasonConfig(id=2, label="Season 2", locked=True, description="Coming soon"),
    SeasonConfig(id=3, label="Season 3", locked=True, description="Coming soon"),
]

_seasons_adapter = TypeAdapter(List[SeasonConfig])


def load_seasons_file(path: str) -> List[SeasonConfig]:
    """
    Load a season registry from a JSON file.

    Raises:
        OSError: If the file cannot be read
        pydantic.ValidationError: If the contents are not a list of seasons
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return _seasons_adapter.validate_python(data)


@lru_cache(maxsize=1)
def get_seasons() -> List[SeasonConfig]:
    """Get the configured seasons, from SEASONS_FILE when set."""
    if settings.SEASONS_FILE:
        seasons = load_seasons_file(settings.SEASONS_FILE)
        logger.info(f"Loaded {len(seasons)} seasons from {settings.SEASONS_FILE}")
        return seasons
    return DEFAULT_SEASONS


def get_season_config(season_id: int) -> Optional[SeasonConfig]:
    for season in get_seasons():
        if season.id == season_id:
            return season
    return None
