"""HTTP client for the Aztec REST API."""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from aztec_node.config import AztecSettings, get_settings
from aztec_node.exceptions import ApiError, ApiResponseError
from aztec_node.models.schemas import ApiEnvelope

logger = logging.getLogger(__name__)


class AztecClient:
    """
    Thin JSON client around a :class:`requests.Session`.

    Every request carries the account headers derived from the settings;
    transport and HTTP failures surface as :class:`ApiError`.
    """

    def __init__(
        self,
        settings: Optional[AztecSettings] = None,
        session: Optional[requests.Session] = None,
    ):
        self.settings = settings or get_settings()
        self.base_url = self.settings.get_endpoint()
        self.session = session or requests.Session()

    def __enter__(self) -> "AztecClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def _build_headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if extra:
            headers.update(extra)
        if self.settings.account_address:
            headers["X-Aztec-Account"] = self.settings.account_address
        key_type = self.settings.key_type_header()
        if key_type:
            headers["X-Aztec-Key-Type"] = key_type
        return headers

    def request(
        self,
        method: str,
        endpoint: str,
        body: Optional[Dict[str, Any]] = None,
        query: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Send one request and decode the JSON response.

        Args:
            method: HTTP method
            endpoint: Path appended to the base URL (e.g. "/v1/accounts")
            body: JSON body, never sent with GET
            query: Query parameters, omitted when empty
            headers: Extra headers

        Returns:
            Decoded JSON (usually a dict); ``{}`` for an empty body

        Raises:
            ApiError: If the request fails or the status is not 2xx
        """
        method = method.upper()
        url = f"{self.base_url}{endpoint}"

        kwargs: Dict[str, Any] = {
            "headers": self._build_headers(headers),
            "timeout": self.settings.timeout,
        }
        if method != "GET":
            kwargs["json"] = body if body is not None else {}
        if query:
            kwargs["params"] = query

        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, **kwargs)
            response.raise_for_status()
            if not response.content:
                return {}
            return response.json()
        except requests.RequestException as e:
            status_code = e.response.status_code if e.response is not None else None
            logger.error(f"Aztec API request failed: {method} {url}: {e}")
            raise ApiError(
                f"Aztec API request failed: {e}",
                description=str(e),
                status_code=status_code,
            ) from e
        except ValueError as e:
            logger.error(f"Aztec API returned invalid JSON: {method} {url}: {e}")
            raise ApiError(
                f"Invalid JSON response: {e}",
                description=str(e),
            ) from e

    def request_all_items(
        self,
        method: str,
        endpoint: str,
        body: Optional[Dict[str, Any]] = None,
        query: Optional[Dict[str, Any]] = None,
        property_name: str = "items",
    ) -> List[Any]:
        """
        Fetch every page of a paginated listing.

        Requests ``page`` = 1, 2, ... with ``pageSize`` from the settings
        until the response's ``hasMore`` flag is not ``True``.
        """
        items: List[Any] = []
        params = dict(query or {})
        page = 1

        while True:
            params["page"] = page
            params["pageSize"] = self.settings.page_size
            response = self.request(method, endpoint, body, params)
            if not isinstance(response, dict):
                break

            page_items = response.get(property_name)
            if isinstance(page_items, list):
                items.extend(page_items)

            if response.get("hasMore") is not True:
                break
            page += 1

        logger.debug(f"Fetched {len(items)} items from {endpoint} in {page} page(s)")
        return items


def handle_api_response(response: Any) -> Any:
    """
    Unwrap a ``{success, data, error}`` envelope.

    A dict that is not a valid envelope yields its ``data`` entry.

    Raises:
        ApiResponseError: If ``success`` is false and an error is present
        ApiError: If ``response`` is not a JSON object
    """
    if not isinstance(response, dict):
        raise ApiError(
            "Aztec API request failed: response is not an object",
            description=f"Unexpected response type {type(response).__name__}",
        )
    try:
        envelope = ApiEnvelope[Any].model_validate(response)
    except ValidationError as e:
        logger.debug(f"Response is not a standard envelope: {e}")
        return response.get("data")
    if not envelope.success and envelope.error is not None:
        raise ApiResponseError(
            envelope.error.code,
            envelope.error.message,
            envelope.error.details,
        )
    return envelope.data
