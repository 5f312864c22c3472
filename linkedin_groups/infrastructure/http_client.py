"""LinkedIn HTTP client (transport) for the v1 REST API.

This module performs the actual HTTP round trips for the API wrappers:

- Bearer token injection, unless the URL already carries
  an oauth2_access_token query parameter
- x-li-format: json so LinkedIn answers in JSON instead of XML
- JSON response parsing (empty body -> {})
- HTTP status code -> exception mapping

Request bodies are passed through as already-serialized strings.
"""

import re
from typing import Dict, Any, Optional
import requests
from loguru import logger

from linkedin_groups.core.constants import (
    API_BASE_URL,
    ACCESS_TOKEN_PARAM,
    DEFAULT_HEADERS,
    REQUEST_TIMEOUT_SECONDS,
    HTTPMethod,
)
from linkedin_groups.core.exceptions import APIError, error_for_status
from linkedin_groups.core.protocols import TokenProvider


_TOKEN_PATTERN = re.compile(rf"([?&]{ACCESS_TOKEN_PARAM}=)[^&]*")


class LinkedInHTTPClient:
    """HTTP client for the LinkedIn REST API.

    Implements the Transport protocol: get, post, put and delete take a path
    relative to the API base URL and return the parsed JSON response.
    """

    def __init__(
        self,
        token_provider: TokenProvider,
        api_base_url: str = API_BASE_URL,
        timeout: int = REQUEST_TIMEOUT_SECONDS,
    ):
        """Initialize LinkedIn HTTP client.

        Args:
            token_provider: Provider for OAuth2 access tokens
            api_base_url: Base URL every relative path is joined to
            timeout: Request timeout in seconds (default: 30)
        """
        self.token_provider = token_provider
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()

        logger.debug(f"LinkedInHTTPClient initialized for {self.api_base_url}")

    def __enter__(self) -> "LinkedInHTTPClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _build_url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.api_base_url}{path}"

    def _build_headers(
        self,
        url: str,
        additional_headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, str]:
        """Build request headers including authentication.

        Args:
            url: Full request URL
            additional_headers: Optional headers to merge

        Returns:
            Complete headers dictionary
        """
        headers = dict(DEFAULT_HEADERS)

        # A token in the query string authenticates the request on its own
        if not _TOKEN_PATTERN.search(url):
            headers["Authorization"] = f"Bearer {self.token_provider.get_access_token()}"

        if additional_headers:
            headers.update(additional_headers)

        return headers

    def get(self, path: str, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """Execute a GET request.

        Args:
            path: API path, optionally with a query string
            headers: Additional headers

        Returns:
            Response data as dictionary

        Raises:
            APIError: If request fails
        """
        return self._request(HTTPMethod.GET.value, path, headers=headers)

    def post(
        self,
        path: str,
        body: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """Execute a POST request.

        Args:
            path: API path, optionally with a query string
            body: Serialized request body
            headers: Additional headers

        Returns:
            Response data as dictionary

        Raises:
            APIError: If request fails
        """
        return self._request(HTTPMethod.POST.value, path, body=body, headers=headers)

    def put(
        self,
        path: str,
        body: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """Execute a PUT request. See post()."""
        return self._request(HTTPMethod.PUT.value, path, body=body, headers=headers)

    def delete(self, path: str, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """Execute a DELETE request. See get()."""
        return self._request(HTTPMethod.DELETE.value, path, headers=headers)

    def _request(
        self,
        method: str,
        path: str,
        body: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """Execute an HTTP request and translate failures into APIError.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API path or absolute URL
            body: Serialized request body
            headers: Additional headers

        Returns:
            Response data as dictionary

        Raises:
            APIError: Or the subclass matching the response status
        """
        url = self._build_url(path)
        complete_headers = self._build_headers(url, headers)
        safe_url = self._sanitize_url(url)

        logger.debug(f"{method} {safe_url}")

        try:
            response = self._session.request(
                method=method,
                url=url,
                data=body,
                headers=complete_headers,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"LinkedIn API request timed out: {method} {safe_url}")
            raise APIError(
                f"Request timeout after {self.timeout}s",
                details={"url": safe_url, "error": str(e)},
            )
        except requests.exceptions.ConnectionError as e:
            logger.error(f"LinkedIn API connection failed: {method} {safe_url}")
            raise APIError(
                "Connection error",
                details={"url": safe_url, "error": str(e)},
            )

        if response.status_code >= 400:
            raise self._error_from_response(response, method, safe_url)

        if not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise APIError(
                "Invalid JSON in response",
                status_code=response.status_code,
                response_body=response.text[:500],
                details={"error": str(e)},
            )

    @staticmethod
    def _error_from_response(
        response: requests.Response,
        method: str,
        safe_url: str,
    ) -> APIError:
        """Build the APIError subclass for a failed response.

        LinkedIn error bodies look like
        {"errorCode": 0, "message": "...", "status": 404, ...}.
        """
        message = f"{method} {safe_url} failed"
        details: Dict[str, Any] = {}

        if response.content:
            try:
                error_data = response.json()
            except ValueError:
                error_data = None
            if isinstance(error_data, dict):
                message = error_data.get("message", message)
                details = error_data

        if response.status_code == 404:
            logger.debug(f"LinkedIn API request returned 404: {safe_url}")
        else:
            logger.error(f"LinkedIn API request failed [{response.status_code}]: {message}")

        error_class = error_for_status(response.status_code)
        return error_class(
            message,
            status_code=response.status_code,
            response_body=response.text[:500],
            details=details,
        )

    @staticmethod
    def _sanitize_url(url: str) -> str:
        """Redact access tokens carried in the query string."""
        return _TOKEN_PATTERN.sub(r"\1***REDACTED***", url)

    def close(self):
        """Close the HTTP session."""
        if self._session:
            self._session.close()
