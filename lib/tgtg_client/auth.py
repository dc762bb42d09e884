from __future__ import annotations

from typing import TYPE_CHECKING

from .auth_types import (
    LoginRequest,
    LoginResponse,
    PollRequest,
    PollResponse,
    RefreshTokensRequest,
    RefreshTokensResponse,
    SignupRequest,
    SignupResponse,
)
from .errors import ArgumentError
from .transport import Timeout

if TYPE_CHECKING:
    from .client import TgtgClient

AUTH_BASE_PATH = "auth/v3"


class AuthService:
    """Login handshake (login -> poll), token refresh and signup."""

    def __init__(self, client: TgtgClient):
        self._client = client

    def login(self, login_request: LoginRequest | None, *, timeout: Timeout = None) -> LoginResponse:
        """Start an e-mail login. Returns the polling id, not tokens.

        The user finishes the login from the e-mail; :meth:`poll` then yields the
        tokens. Calling this often makes the API answer 429 for about 15 minutes.
        """
        if login_request is None:
            raise ArgumentError("login_request", "must not be None")

        req = self._client.new_request("POST", f"{AUTH_BASE_PATH}/authByEmail", login_request)
        return self._client.do(req, LoginResponse, timeout=timeout)

    def poll(self, poll_request: PollRequest | None, *, timeout: Timeout = None) -> PollResponse:
        """Check whether the e-mail login was confirmed.

        Until it is, the API answers 202 with an empty body, which raises
        DecodeError; treat that as "pending" and poll again.
        """
        if poll_request is None:
            raise ArgumentError("poll_request", "must not be None")

        req = self._client.new_request("POST", f"{AUTH_BASE_PATH}/authByRequestPollingId", poll_request)
        resp = self._client.do(req, PollResponse, timeout=timeout)
        self._client.auth_context.set(resp.access_token, resp.refresh_token, resp.startup_data.user.user_id)
        return resp

    def refresh(self, refresh_request: RefreshTokensRequest | None = None, *, timeout: Timeout = None) -> RefreshTokensResponse:
        """Exchange a refresh token for a new token pair.

        Without ``refresh_request`` the client's stored refresh token is used.
        The stored user id is kept.
        """
        if refresh_request is None:
            refresh_token = self._client.auth_context.refresh_token
            if not refresh_token:
                raise ArgumentError("refresh_request", "must not be None - client has no refresh token")
            refresh_request = RefreshTokensRequest(refresh_token=refresh_token)

        req = self._client.new_request("POST", f"{AUTH_BASE_PATH}/token/refresh", refresh_request)
        resp = self._client.do(req, RefreshTokensResponse, timeout=timeout)
        self._client.auth_context.set_tokens(resp.access_token, resp.refresh_token)
        return resp

    def signup(self, signup_request: SignupRequest | None, *, timeout: Timeout = None) -> SignupResponse:
        if signup_request is None:
            raise ArgumentError("signup_request", "must not be None")

        req = self._client.new_request("POST", f"{AUTH_BASE_PATH}/signUpByEmail", signup_request)
        resp = self._client.do(req, SignupResponse, timeout=timeout)
        login = resp.login_response
        self._client.auth_context.set(login.access_token, login.refresh_token, login.startup_data.user.user_id)
        return resp
