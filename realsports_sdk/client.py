"""
Real Sports SDK Client

Async HTTP client for the Real Sports draft contest API.
Forwards the static device credentials and signs every request
with a fresh request token.
"""

import logging
import os
import re
import time
from typing import Any, Optional

import httpx
from hashids import Hashids
from pydantic import ValidationError

from .models import RealSportsDraft

logger = logging.getLogger(__name__)

# Real Sports API Configuration
REAL_BASE_URL = "https://web.realsports.io"
REAL_WEB_ORIGIN = "https://realsports.io"
REAL_API_VERSION = "27"
REAL_DEVICE_TYPE = "desktop_web"

# The web app encodes Date.now() with these Hashids parameters
REQUEST_TOKEN_SALT = "realwebapp"
REQUEST_TOKEN_MIN_LENGTH = 16

# Special values that may appear instead of a draft code
FORFEIT = "forfeit"
DQ = "dq"

_VIEW_CODE_RE = re.compile(r"/view/([A-Za-z0-9_-]+)")
_CONTEST_ID_RE = re.compile(r"playerratingcontest/(\d+)")


class RealSportsClientError(Exception):
    """Exception raised for Real Sports API errors."""

    pass


def generate_request_token(timestamp_ms: Optional[int] = None) -> str:
    """
    Generate a `real-request-token` header value.

    Args:
        timestamp_ms: Milliseconds since the epoch, defaults to now

    Returns:
        The Hashids encoding of the timestamp
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    hashids = Hashids(salt=REQUEST_TOKEN_SALT, min_length=REQUEST_TOKEN_MIN_LENGTH)
    return hashids.encode(timestamp_ms)


class RealSportsClient:
    """
    Client for fetching draft entries from the Real Sports API.

    Credentials default to the REAL_AUTH_INFO and REAL_DEVICE_UUID
    environment variables.
    """

    def __init__(
        self,
        auth_info: Optional[str] = None,
        device_uuid: Optional[str] = None,
        timeout: float = 30.0,
        base_url: str = REAL_BASE_URL,
        version: str = REAL_API_VERSION,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the Real Sports client.

        Args:
            auth_info: Value of the `real-auth-info` header
            device_uuid: Value of the `real-device-uuid` header
            timeout: Request timeout in seconds
            base_url: API root, without a trailing slash
            version: Value of the `real-version` header
            transport: Optional httpx transport (used for testing)
        """
        self.auth_info = auth_info or os.getenv("REAL_AUTH_INFO")
        self.device_uuid = device_uuid or os.getenv("REAL_DEVICE_UUID")
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")
        self.version = version
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.auth_info and self.device_uuid)

    def _headers(self) -> dict[str, str]:
        return {
            "real-auth-info": self.auth_info or "",
            "real-device-type": REAL_DEVICE_TYPE,
            "real-device-uuid": self.device_uuid or "",
            "real-request-token": generate_request_token(),
            "real-version": self.version,
            "Origin": REAL_WEB_ORIGIN,
            "Referer": REAL_WEB_ORIGIN + "/",
        }

    def draft_url(self, draft_id: int, user_draft_code: str) -> str:
        return (
            f"{self.base_url}/games/playerratingcontest/{draft_id}"
            f"/view/{user_draft_code}?contestType=sport"
        )

    async def _get(self, url: str) -> dict[str, Any]:
        """
        Make an authenticated GET request to the Real Sports API.

        Raises:
            RealSportsClientError: If credentials are missing or the request fails
        """
        if not self.is_configured:
            raise RealSportsClientError("Real Sports API credentials not configured")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(url, headers=self._headers())
        except httpx.HTTPError as e:
            raise RealSportsClientError(f"Real Sports API request failed: {e}") from e

        if not response.is_success:
            raise RealSportsClientError(
                f"Real Sports API error: {response.status_code} {response.reason_phrase}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise RealSportsClientError(
                f"Real Sports API returned invalid JSON: {e}"
            ) from e

    async def get_draft(self, draft_id: int, user_draft_code: str) -> RealSportsDraft:
        """
        Fetch a single draft entry.

        Args:
            draft_id: Contest ID for the game day (e.g. 1442)
            user_draft_code: Per-user entry code (e.g. 'xnrW4GxJ')

        Returns:
            The draft entry with its lineup and total score

        Raises:
            RealSportsClientError: If the request fails or the draft cannot be mapped
        """
        data = await self._get(self.draft_url(draft_id, user_draft_code))
        if not isinstance(data, dict):
            raise RealSportsClientError("Real Sports API returned an unexpected body")
        try:
            return RealSportsDraft.from_api(data, draft_id)
        except (ValidationError, AttributeError, TypeError) as e:
            raise RealSportsClientError(
                f"Real Sports API returned an unexpected draft: {e}"
            ) from e

    async def fetch_draft_entry(
        self, draft_id: int, user_draft_code: str
    ) -> Optional[RealSportsDraft]:
        """Like get_draft but logs failures and returns None."""
        try:
            return await self.get_draft(draft_id, user_draft_code)
        except RealSportsClientError as e:
            logger.error(f"Failed to fetch Real Sports draft {draft_id}/{user_draft_code}: {e}")
            return None


# Utility Functions


def parse_draft_code(raw: Optional[str]) -> str:
    """
    Extract a user draft code from a sheet cell.

    Args:
        raw: A raw code ('xnrW4GxJ'), a full draft URL
            ('.../playerratingcontest/1429/view/Y3KmAmyJ?contestType=sport'),
            or a FORFEIT/DQ marker

    Returns:
        The code, the marker as written, or '' for an empty cell
    """
    if not raw:
        return ""
    trimmed = raw.strip()
    if trimmed.lower() in (FORFEIT, DQ):
        return trimmed

    match = _VIEW_CODE_RE.search(trimmed)
    if match:
        return match.group(1)
    return trimmed


def parse_draft_id(raw: Optional[str]) -> Optional[int]:
    """
    Extract a contest ID from a raw number or a draft URL.

    Returns:
        The positive contest ID, or None if none can be found
    """
    if not raw:
        return None
    trimmed = raw.strip()

    try:
        number = float(trimmed)
    except ValueError:
        number = None
    if number is not None and number > 0 and number.is_integer():
        return int(number)

    match = _CONTEST_ID_RE.search(trimmed)
    if match:
        return int(match.group(1))
    return None


def is_forfeit(code: Optional[str]) -> bool:
    return (code or "").lower() == FORFEIT


def is_dq(code: Optional[str]) -> bool:
    return (code or "").lower() == DQ
