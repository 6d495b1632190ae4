# ABOUTME: Client for the Metropolitan Museum of Art collection API
# ABOUTME: Fetches public-domain painting ids and object records, returning empty results on failure

import logging
import requests
from typing import Any, Optional

from paintingguessr.config import Config

log = logging.getLogger(__name__)


class MetClient:
    """
    Client for the Met collection API.

    Never raises for upstream problems: the id search returns [] and an
    object fetch returns None, so callers can fall back to curated data.
    """

    SEARCH_PARAMS = {
        "hasImages": "true",
        "medium": "Paintings",
        "isPublicDomain": "true",
        "q": "*",
    }

    def __init__(self, base_url: str = None, timeout_seconds: int = None):
        self.base_url = (base_url or Config.MET_API_BASE).rstrip("/")
        self.timeout_seconds = timeout_seconds or Config.MET_REQUEST_TIMEOUT_SECONDS

    def fetch_object_ids(self) -> list[int]:
        """
        Fetch ids of every public-domain painting with an image.

        Returns:
            List of object ids, [] on any error
        """
        try:
            response = requests.get(
                f"{self.base_url}/search",
                params=self.SEARCH_PARAMS,
                timeout=self.timeout_seconds,
            )

            if response.status_code != 200:
                log.error(f"Met API search HTTP error: {response.status_code}")
                return []

            data = response.json()
            object_ids = [int(object_id) for object_id in (data.get("objectIDs") or [])]

        except (requests.RequestException, ValueError, TypeError, AttributeError) as e:
            log.error(f"Met API search failed: {e}")
            return []

        if not object_ids:
            log.error("Met API search returned no ids")
        return object_ids

    def fetch_object(self, object_id: int) -> Optional[dict[str, Any]]:
        """
        Fetch the full record for one object.

        Returns:
            Raw record dict, or None on HTTP error, timeout or bad JSON
        """
        try:
            response = requests.get(
                f"{self.base_url}/objects/{object_id}",
                timeout=self.timeout_seconds,
            )

            if response.status_code != 200:
                log.warning(f"Met API object {object_id} HTTP error: {response.status_code}")
                return None

            data = response.json()

        except (requests.RequestException, ValueError) as e:
            log.warning(f"Met API object {object_id} request failed: {e}")
            return None

        if not isinstance(data, dict):
            log.warning(f"Met API object {object_id} returned unexpected payload: {type(data).__name__}")
            return None

        return data
