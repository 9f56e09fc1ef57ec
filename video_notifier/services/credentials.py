"""Brightcove OAuth access token management.

The CMS API is called with a bearer token obtained through the OAuth
client-credentials grant. Tokens are not tracked for expiry: a 401 from the
CMS API is the signal to renew (see video_notifier/services/brightcove.py).
"""

import asyncio
import logging
import threading

import httpx

from video_notifier.config import Settings

logger = logging.getLogger(__name__)

TOKEN_REQUEST_BODY = "grant_type=client_credentials"


class AuthError(Exception):
    """Error obtaining a Brightcove access token."""

    pass


class EmptyTokenError(AuthError):
    """Token endpoint answered 200 without a usable access_token."""

    pass


class AuthStatusError(AuthError):
    """Token endpoint answered with a non-200 status."""

    def __init__(self, status_code: int):
        super().__init__(f"Invalid statusCode received: [{status_code}]")
        self.status_code = status_code


class AuthTransportError(AuthError):
    """Token endpoint could not be reached."""

    pass


class TokenStore:
    """Thread-safe holder for the current bearer token."""

    def __init__(self, token: str = ""):
        self._token = token
        self._lock = threading.Lock()

    def get(self) -> str:
        with self._lock:
            return self._token

    def set(self, token: str) -> None:
        with self._lock:
            self._token = token


class CredentialManager:
    """Renews the access token held in a TokenStore."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient, store: TokenStore):
        self._settings = settings
        self._client = client
        self.store = store
        self._renew_lock = asyncio.Lock()

    @property
    def token(self) -> str:
        return self.store.get()

    async def renew(self, stale_token: str | None = None) -> None:
        """Exchange the client credentials for a fresh access token.

        Args:
            stale_token: The token the caller saw rejected. If the store already
                holds a different token, a concurrent renewal has replaced it and
                no new exchange is made.

        Raises:
            AuthStatusError: Token endpoint returned a non-200 status
            EmptyTokenError: Response had no access_token
            AuthTransportError: Token endpoint unreachable
        """
        async with self._renew_lock:
            if stale_token is not None and self.store.get() != stale_token:
                logger.info("Access token already renewed by a concurrent request")
                return
            self.store.set(await self._request_token())

    async def _request_token(self) -> str:
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        if self._settings.brightcove_auth:
            headers["Authorization"] = self._settings.brightcove_auth

        try:
            response = await self._client.post(
                self._settings.brightcove_oauth_url,
                content=TOKEN_REQUEST_BODY,
                headers=headers,
            )
        except httpx.RequestError as e:
            raise AuthTransportError(f"Failed to connect to Brightcove OAuth API: {e}") from e

        if response.status_code != 200:
            raise AuthStatusError(response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            raise EmptyTokenError(f"Undecodable access token response: {e}") from e

        token = body.get("access_token") if isinstance(body, dict) else None
        if not isinstance(token, str) or not token:
            raise EmptyTokenError(f"Empty access token: [{body!r}]")

        logger.info(
            f"Access token renewed: token_type={body.get('token_type')} expires_in={body.get('expires_in')}"
        )
        return token
