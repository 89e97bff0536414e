import re
from typing import Dict, List, Optional

import httpx
import pytest

from realsports_sdk import RealSportsClient

_DRAFT_PATH_RE = re.compile(r"/games/playerratingcontest/(\d+)/view/([^/?]+)")


def draft_payload(draft_id: int, code: str, scores: List[float]) -> dict:
    return {
        "info": {
            "contest": {
                "id": draft_id,
                "day": "2026-02-08",
                "sport": "nba",
                "isFinalized": True,
                "additionalInfo": {"lineupSize": len(scores)},
            },
            "user": {"userName": f"user_{code}"},
            "userId": f"id_{code}",
        },
        "lineup": [
            {
                "order": i + 1,
                "playerId": 100 + i,
                "firstName": "Player",
                "lastName": str(i + 1),
                "score": score,
            }
            for i, score in enumerate(scores)
        ],
    }


def make_client(
    lineups: Dict[str, List[float]],
    requests: Optional[list] = None,
) -> RealSportsClient:
    """
    A client whose API answers with the given lineup scores per draft code.

    Unknown codes get a 404. Every request is appended to `requests`.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        match = _DRAFT_PATH_RE.search(request.url.path)
        if not match or match.group(2) not in lineups:
            return httpx.Response(404, json={"error": "not found"})
        draft_id, code = int(match.group(1)), match.group(2)
        return httpx.Response(200, json=draft_payload(draft_id, code, lineups[code]))

    return RealSportsClient(
        auth_info="test-auth",
        device_uuid="test-device",
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def requests_log() -> list:
    return []


@pytest.fixture(name="make_client")
def make_client_fixture():
    return make_client
