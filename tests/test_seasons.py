import json

import pytest
from pydantic import ValidationError

from draft_league.core.config import settings
from draft_league.data.seasons import get_season_config, get_seasons, load_seasons_file


@pytest.fixture
def seasons_file(tmp_path, monkeypatch):
    path = tmp_path / "seasons.json"
    monkeypatch.setattr(settings, "SEASONS_FILE", str(path))
    get_seasons.cache_clear()
    yield path
    get_seasons.cache_clear()


def test_default_seasons() -> None:
    assert get_season_config(1).locked is False
    assert get_season_config(3).description == "Coming soon"
    assert get_season_config(4) is None


def test_seasons_file(seasons_file) -> None:
    seasons_file.write_text(
        json.dumps(
            [
                {
                    "id": 1,
                    "label": "Season 1",
                    "locked": False,
                    "sheet_base_url": "https://docs.google.com/spreadsheets/d/e/abc/pub",
                    "gids": {"standings": 11, "schedule": 22, "rosters": 33},
                },
                {"id": 2, "label": "Season 2"},
            ]
        )
    )

    seasons = get_seasons()

    assert [s.id for s in seasons] == [1, 2]
    assert get_season_config(1).gids.schedule == 22
    # Seasons are locked unless the file says otherwise
    assert get_season_config(2).locked is True


def test_invalid_seasons_file(tmp_path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"label": "no id"}]))
    with pytest.raises(ValidationError):
        load_seasons_file(str(path))
