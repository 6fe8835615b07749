"""HTTP client for the Contentful Management and Delivery APIs."""

from typing import Dict, Optional

import requests

from .config import ContentfulConfig
from .errors import FetchFailed, InvalidArgument, RateLimited
from .models import Page

RATE_LIMIT_HEADER = "X-Contentful-RateLimit-Second-Remaining"
ORDER_BY_CREATED = "sys.createdAt"

# ============================================
# CONTENTFUL CLIENT
# ============================================

class ContentfulClient:
    """Client for the Contentful CMA (assets, users) and CDA (entries)"""

    def __init__(self, config: ContentfulConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session if session is not None else requests.Session()
        self.space_url = f"/spaces/{config.space_id}"
        self.environment_url = f"{self.space_url}/environments/{config.environment_id}"

    def _headers(self, token: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json"
        }

    def _request(self, base_url: str, token: str, endpoint: str, params: Dict = None) -> Dict:
        url = f"{base_url}{endpoint}"

        try:
            response = self.session.get(url, headers=self._headers(token), params=params,
                                        timeout=self.config.request_timeout)
        except requests.exceptions.RequestException as e:
            raise FetchFailed(f"Error calling Contentful at {url}: {e}", cause=e, url=url) from e

        if not response.ok:
            message = f"Error fetching {endpoint} from Contentful: {response.status_code}"
            if _rate_limit_exhausted(response):
                raise RateLimited(message, status=response.status_code, url=url)
            raise FetchFailed(message, status=response.status_code, url=url)

        try:
            return response.json()
        except ValueError as e:
            raise FetchFailed(f"Contentful returned invalid JSON for {endpoint}: {e}",
                              status=response.status_code, cause=e, url=url) from e

    def _cma(self, endpoint: str, params: Dict = None) -> Dict:
        return self._request(self.config.cma_base_url, self.config.cma_token, endpoint, params)

    def _cda(self, endpoint: str, params: Dict = None) -> Dict:
        return self._request(self.config.cda_base_url, self.config.cda_token, endpoint, params)

    def get_assets(self, skip: int = 0) -> Page:
        params = {"order": ORDER_BY_CREATED, "skip": skip, "limit": self.config.page_size}
        return Page.from_json(self._cma(f"{self.environment_url}/assets", params))

    def get_users(self, skip: int = 0) -> Page:
        params = {"order": ORDER_BY_CREATED, "skip": skip, "limit": self.config.page_size}
        return Page.from_json(self._cma(f"{self.space_url}/users", params))

    def get_linked_entries(self, asset_id: str, skip: int = 0) -> Page:
        """Entries (via the CDA) that link to the given asset"""
        if not asset_id:
            raise InvalidArgument("An asset ID is required to look up linked entries")
        params = {"links_to_asset": asset_id, "skip": skip, "limit": 1}
        return Page.from_json(self._cda(f"{self.environment_url}/entries", params))

    def close(self):
        self.session.close()


def _rate_limit_exhausted(response: requests.Response) -> bool:
    remaining = response.headers.get(RATE_LIMIT_HEADER)
    if remaining is None:
        return False
    try:
        return int(remaining) == 0
    except ValueError:
        return False
