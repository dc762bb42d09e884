from __future__ import annotations

import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class AuthSnapshot:
    access_token: str = ""
    refresh_token: str = ""
    user_id: str = ""


class AuthContext:
    """Access token, refresh token and user id shared by one client.

    Writes replace the tokens (and the user id) together under a lock, so a
    reader never sees a token pair from two different logins. Concurrent
    poll/refresh/signup calls are still last-write-wins; callers that refresh
    from several threads must serialize those calls themselves.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state = AuthSnapshot()

    def set(self, access_token: str, refresh_token: str, user_id: str) -> None:
        with self._lock:
            self._state = AuthSnapshot(access_token, refresh_token, user_id)

    def set_tokens(self, access_token: str, refresh_token: str) -> None:
        """Replace the token pair and keep the current user id."""
        with self._lock:
            self._state = AuthSnapshot(access_token, refresh_token, self._state.user_id)

    def snapshot(self) -> AuthSnapshot:
        with self._lock:
            return self._state

    @property
    def access_token(self) -> str:
        return self.snapshot().access_token

    @property
    def refresh_token(self) -> str:
        return self.snapshot().refresh_token

    @property
    def user_id(self) -> str:
        return self.snapshot().user_id
