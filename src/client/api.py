"""HTTP client for the auth API.

Every request carries ``Authorization: Bearer <token>`` when the session
store holds a token.
"""

import logging
import os
from typing import Any

import httpx

from client.session import SessionStore

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8000/api"
API_TIMEOUT_SECONDS = 10.0
USER_FIELDS = ("id", "name", "email")


class ApiError(Exception):
    """API call failed (HTTP error status or transport failure)."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class SessionBearerAuth(httpx.Auth):
    """Attaches the stored token, read fresh on every request."""

    def __init__(self, session: SessionStore):
        self.session = session

    def auth_flow(self, request: httpx.Request):
        token = self.session.token
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        yield request


class AuthApiClient:
    def __init__(
        self,
        session: SessionStore,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.session = session
        self._http = httpx.Client(
            base_url=base_url or os.getenv("AUTH_API_URL", DEFAULT_API_URL),
            auth=SessionBearerAuth(session),
            timeout=API_TIMEOUT_SECONDS,
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "AuthApiClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _request(self, method: str, path: str, json: dict | None = None) -> dict[str, Any]:
        try:
            response = self._http.request(method, path, json=json)
        except httpx.HTTPError as e:
            raise ApiError(f"Could not reach the server: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if response.is_error:
            message = data.get("message")
            raise ApiError(message or f"Request failed with status {response.status_code}", response.status_code)
        return data

    def _remember(self, data: dict) -> dict:
        token = data.get("token")
        user = data.get("user")
        if token:
            self.session.save(token, user.get("name", "") if isinstance(user, dict) else "")
        return data

    def register(self, name: str, email: str, password: str, confirm_password: str) -> dict:
        """POST /auth/register and store the issued token."""
        data = self._request("POST", "/auth/register", json={
            "name": name,
            "email": email,
            "password": password,
            "confirmPassword": confirm_password,
        })
        return self._remember(data)

    def login(self, email: str, password: str) -> dict:
        """POST /auth/login and store the issued token."""
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        return self._remember(data)

    def get_current_user(self) -> dict:
        """GET /auth/me and return the user object.

        Raises:
            ApiError: request failed or the reply carries no usable user
        """
        user = self._request("GET", "/auth/me").get("user")
        if not isinstance(user, dict) or not all(isinstance(user.get(key), str) for key in USER_FIELDS):
            raise ApiError("Server returned no user data")
        return user

    def logout(self) -> None:
        self.session.clear()
