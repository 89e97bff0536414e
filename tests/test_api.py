import logging

import httpx
import pytest
from fastapi.testclient import TestClient

from draft_league.api.deps import get_real_sports_client, get_season_data
from draft_league.core.config import settings
from draft_league.data.league_data import TEAMS
from draft_league.main import app
from draft_league.schemas.game import Game, Matchup
from draft_league.services.sheets import SeasonData
from realsports_sdk import RealSportsClient

API = "/api/v1"


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def real_sports(make_client, requests_log):
    """Route Real Sports lookups to a fake API with a few known drafts."""
    fake = make_client({"home1": [30, 25], "away1": [12, 8]}, requests_log)
    app.dependency_overrides[get_real_sports_client] = lambda: fake
    return fake


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "healthy"}
    assert "Welcome" in client.get("/").json()["message"]


def test_list_seasons(client) -> None:
    seasons = client.get(f"{API}/seasons").json()
    assert [s["id"] for s in seasons] == [1, 2, 3]
    assert seasons[0]["locked"] is False
    assert seasons[1]["locked"] is True


def test_season_info(client) -> None:
    assert client.get(f"{API}/seasons/2").json()["label"] == "Season 2"
    assert client.get(f"{API}/seasons/9").status_code == 404


def test_locked_and_unknown_seasons(client) -> None:
    response = client.get(f"{API}/seasons/2/standings")
    assert response.status_code == 403
    assert response.json()["detail"] == "Season is locked"

    response = client.get(f"{API}/seasons/9/teams")
    assert response.status_code == 404
    assert response.json()["detail"] == "Season not found"


def test_teams(client) -> None:
    teams = client.get(f"{API}/seasons/1/teams").json()
    assert len(teams) == len(TEAMS)

    suns = client.get(f"{API}/seasons/1/teams/Suns").json()
    assert suns["abbrev"] == "PHX"
    assert client.get(f"{API}/seasons/1/teams/Lakers").status_code == 404


def test_standings(client) -> None:
    rows = client.get(f"{API}/seasons/1/standings", params={"conference": "West"}).json()
    assert rows[0]["team"] == "Suns"
    assert rows[0]["pct_display"] == "0.800"
    assert {r["conference"] for r in rows} == {"West"}

    assert client.get(f"{API}/seasons/1/standings", params={"conference": "North"}).status_code == 422


def test_schedule_summary_and_draft_order(client) -> None:
    schedule = client.get(f"{API}/seasons/1/schedule").json()
    assert schedule[0]["label"] == "Preseason Game 1"

    summary = client.get(f"{API}/seasons/1/summary").json()
    assert summary["team_count"] == 8
    assert summary["total_games"] == 14

    order = client.get(f"{API}/seasons/1/draft-order").json()
    assert order[0]["pick"] == 1
    assert order[0]["win_pct"] <= order[-1]["win_pct"]

    capital = client.get(f"{API}/seasons/1/draft-capital").json()
    assert {c["team"] for c in capital} == {t.name for t in TEAMS}


def test_draft_requires_params(client, real_sports) -> None:
    response = client.get(f"{API}/draft", params={"draftId": "1442"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Missing draftId or code parameter"


def test_draft_rejects_bad_id(client, real_sports) -> None:
    response = client.get(f"{API}/draft", params={"draftId": "abc", "code": "home1"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid draftId"


def test_draft_upstream_failure(client, real_sports) -> None:
    response = client.get(f"{API}/draft", params={"draftId": "1442", "code": "nope"})
    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to fetch draft data"


def test_draft(client, real_sports, requests_log) -> None:
    response = client.get(f"{API}/draft", params={"draftId": "1442", "code": "home1"})

    assert response.status_code == 200
    draft = response.json()
    assert draft["total_score"] == 55
    assert draft["contest_id"] == 1442
    assert len(draft["lineup"]) == 2
    assert requests_log[0].headers["real-auth-info"] == "test-auth"


def test_scores_empty(client, real_sports, requests_log) -> None:
    for body in ({}, {"matchups": []}):
        response = client.post(f"{API}/scores", json=body)
        assert response.status_code == 200
        assert response.json() == {"results": [], "standings": {}}
    assert requests_log == []


def test_scores(client, real_sports) -> None:
    body = {
        "matchups": [
            {
                "gameLabel": "Game 7",
                "home": "Suns",
                "away": "Warriors",
                "draftId": 1442,
                "homeDraftCode": "home1",
                "awayDraftCode": "away1",
            },
            {
                "gameLabel": "Game 7",
                "home": "Pacers",
                "away": "Pistons",
                "draftId": 1442,
                "homeDraftCode": "FORFEIT",
                "awayDraftCode": "away1",
            },
        ]
    }

    response = client.post(f"{API}/scores", json=body)

    assert response.status_code == 200
    data = response.json()
    first, second = data["results"]
    assert (first["home_score"], first["away_score"], first["winner"]) == (55, 20, "home")
    assert (second["forfeit"], second["winner"]) == ("home", "away")
    assert data["standings"]["Suns"] == {"wins": 1, "losses": 0, "pf": 55, "pa": 20}
    assert data["standings"]["Pistons"]["wins"] == 1


def test_scores_rejects_bad_body(client, real_sports) -> None:
    response = client.post(f"{API}/scores", json={"matchups": [{"home": "Suns"}]})
    assert response.status_code == 422


def test_live_scores(client, real_sports) -> None:
    schedule = [
        Game(
            id=0,
            label="Game 7",
            date="2/8",
            matchups=[
                Matchup(
                    home="Suns",
                    away="Warriors",
                    draft_id=1442,
                    home_draft_code="home1",
                    away_draft_code="away1",
                )
            ],
        )
    ]

    async def season_data():
        return SeasonData(teams=[t.model_copy() for t in TEAMS], schedule=schedule)

    app.dependency_overrides[get_season_data] = season_data

    data = client.get(f"{API}/seasons/1/live").json()

    matchup = data["schedule"][0]["matchups"][0]
    assert (matchup["home_total"], matchup["away_total"]) == (55, 20)
    assert matchup["winner"] == "home"
    assert data["schedule"][0]["played"] is True
    assert data["new_results"]["Suns"]["wins"] == 1

    teams = {t["name"]: t for t in data["teams"]}
    assert (teams["Suns"]["wins"], teams["Suns"]["losses"]) == (5, 1)
    assert (teams["Warriors"]["wins"], teams["Warriors"]["losses"]) == (2, 4)


def test_leaderboard_and_adp(client) -> None:
    schedule = [
        Game(
            id=0,
            label="Game 1",
            date="1/28",
            played=True,
            matchups=[
                Matchup(
                    home="Suns",
                    away="Thunder",
                    home_starters=["Booker"],
                    home_starter_scores=[30],
                    away_starters=["SGA"],
                    away_starter_scores=[40],
                )
            ],
        )
    ]

    async def season_data():
        return SeasonData(teams=TEAMS, schedule=schedule)

    app.dependency_overrides[get_season_data] = season_data

    board = client.get(f"{API}/seasons/1/scoring/leaderboard/Game 1").json()
    assert [e["player"] for e in board] == ["SGA", "Booker"]

    adp = client.get(f"{API}/seasons/1/scoring/adp").json()
    assert adp[0] == {
        "player": "SGA",
        "team": "Thunder",
        "games_played": 1,
        "avg_score": 40,
        "adp": 1,
    }


def test_scoring_rules(client) -> None:
    rules = client.get(f"{API}/scoring").json()
    assert set(rules["special_codes"]) == {"FORFEIT", "DQ"}
    assert rules["batch_size"] == 4


def test_team_draft_capital(client) -> None:
    capital = client.get(f"{API}/seasons/1/draft-capital/Raptors").json()
    assert capital["seasons"][0]["picks"][0] == {"round": "1st", "origin": "Raptors"}
    assert client.get(f"{API}/seasons/1/draft-capital/Lakers").status_code == 404


def test_draft_id_leading_integer(client, real_sports, requests_log) -> None:
    response = client.get(f"{API}/draft", params={"draftId": "1442abc", "code": "home1"})

    assert response.status_code == 200
    assert response.json()["contest_id"] == 1442
    assert requests_log[0].url.path == "/games/playerratingcontest/1442/view/home1"


def test_draft_malformed_lineup(client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"lineup": [{"playerId": "p-7", "score": 3}]})

    fake = RealSportsClient(auth_info="a", device_uuid="b", transport=httpx.MockTransport(handler))
    app.dependency_overrides[get_real_sports_client] = lambda: fake

    response = client.get(f"{API}/draft", params={"draftId": "1442", "code": "abc"})

    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to fetch draft data"


def test_app_sets_package_log_level() -> None:
    assert logging.getLogger("draft_league").getEffectiveLevel() == logging.getLevelName(settings.LOG_LEVEL)
