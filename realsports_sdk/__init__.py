"""Real Sports SDK - Python client for the Real Sports draft contest API."""

from .client import (
    RealSportsClient,
    RealSportsClientError,
    generate_request_token,
    is_dq,
    is_forfeit,
    parse_draft_code,
    parse_draft_id,
)
from .models import RealSportsDraft, RealSportsPlayer

__all__ = [
    "RealSportsClient",
    "RealSportsClientError",
    "RealSportsDraft",
    "RealSportsPlayer",
    "generate_request_token",
    "is_dq",
    "is_forfeit",
    "parse_draft_code",
    "parse_draft_id",
]
