import asyncio
import logging
from typing import List

import streamlit as st

from initiative_status.config import CACHE_TTL_SECONDS, LinearSettings
from initiative_status.data.initiatives import Initiative
from initiative_status.data.linear import LinearClient

logger = logging.getLogger(__name__)


def load_initiatives() -> List[Initiative]:
    """Wrapper that resolves config and calls the cached implementation.

    A missing API key raises `ConfigurationError` here, outside the cache, so
    it is never memoized.
    """
    settings = LinearSettings.from_env()
    api_key = settings.require_api_key()

    # Call cached impl with explicit params for proper cache keying
    return _load_initiatives_impl(api_key, settings.team_id, settings.api_url, settings.timeout_seconds)


@st.cache_data(show_spinner=False, ttl=CACHE_TTL_SECONDS)
def _load_initiatives_impl(api_key: str, team_id: str, api_url: str, timeout_seconds: float) -> List[Initiative]:
    """Fetch and normalize all initiatives for one team.
    Cached by api_key, team_id, api_url and timeout; failures are not cached.
    """
    client = LinearClient(api_key, team_id=team_id, api_url=api_url, timeout=timeout_seconds)
    initiatives = asyncio.run(client.list_initiatives())
    logger.debug("Cached %d initiatives for team %s", len(initiatives), team_id)
    return initiatives


def clear_initiatives_cache() -> None:
    _load_initiatives_impl.clear()  # type: ignore[attr-defined]
