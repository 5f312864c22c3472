"""Protocol definitions (interfaces) for the LinkedIn Groups client.

The groups client only depends on these interfaces, so any object with
matching methods (including test doubles) can stand in for the real
HTTP transport or token source.
"""

from typing import Protocol, Dict, Any, Optional


class TokenProvider(Protocol):
    """Interface for providing OAuth2 access tokens."""

    def get_access_token(self) -> str:
        """Retrieve the current access token.

        Returns:
            str: Valid access token

        Raises:
            AuthenticationError: If token retrieval fails
        """
        ...


class Transport(Protocol):
    """Interface for the HTTP layer the groups client delegates to.

    Paths are relative to the API base URL and may carry a query string.
    Bodies are already-serialized strings.
    """

    def get(self, path: str, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """Execute a GET request and return the parsed response.

        Raises:
            APIError: If the request fails
        """
        ...

    def post(
        self,
        path: str,
        body: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """Execute a POST request.

        Raises:
            APIError: If the request fails
        """
        ...

    def put(
        self,
        path: str,
        body: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """Execute a PUT request.

        Raises:
            APIError: If the request fails
        """
        ...

    def delete(self, path: str, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """Execute a DELETE request.

        Raises:
            APIError: If the request fails
        """
        ...
