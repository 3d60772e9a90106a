"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

import streamlit as st

from initiative_status.data.exceptions import ConfigurationError

LINEAR_API_URL = "https://api.linear.app/graphql"
DEFAULT_TEAM_ID = "ca747a2c-e5e3-4221-b38c-4369ab5a107f"
DEFAULT_TIMEOUT_SECONDS = 15.0
ISSUE_PAGE_SIZE = 50
CACHE_TTL_SECONDS = 300


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("overview", "Overview"),
    TabConfig("timeline", "Timeline"),
    TabConfig("initiatives", "All Initiatives"),
    TabConfig("data", "Data"),
]


def get_secret(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        # st.secrets raises when no secrets.toml exists outside Streamlit Cloud
        pass
    return default


def _get_float(name: str, default: float) -> float:
    raw = get_secret(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class LinearSettings:
    api_key: Optional[str]
    team_id: str = DEFAULT_TEAM_ID
    api_url: str = LINEAR_API_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "LinearSettings":
        return cls(
            api_key=get_secret("LINEAR_API_KEY"),
            team_id=get_secret("LINEAR_TEAM_ID") or DEFAULT_TEAM_ID,
            api_url=get_secret("LINEAR_API_URL") or LINEAR_API_URL,
            timeout_seconds=_get_float("LINEAR_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        )

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError("LINEAR_API_KEY environment variable is not set")
        return self.api_key
