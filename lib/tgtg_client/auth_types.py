from __future__ import annotations

from pydantic import Field

from .models import WireModel


class LoginRequest(WireModel):
    device_type: str = ""
    email: str = ""


class LoginResponse(WireModel):
    polling_id: str = ""
    state: str = ""


class PollRequest(WireModel):
    device_type: str = ""
    email: str = ""
    request_polling_id: str = ""


class User(WireModel):
    user_id: str = ""


class StartupData(WireModel):
    user: User = Field(default_factory=User)


class PollResponse(WireModel):
    access_token: str = ""
    refresh_token: str = ""
    access_token_ttl_seconds: int = 0
    startup_data: StartupData = Field(default_factory=StartupData)


class RefreshTokensRequest(WireModel):
    refresh_token: str = ""


class RefreshTokensResponse(WireModel):
    """New token pair; the API does not echo the user id here."""

    access_token: str = ""
    refresh_token: str = ""
    access_token_ttl_seconds: int = 0


class SignupRequest(WireModel):
    country_id: str = ""
    device_type: str = ""
    email: str = ""
    name: str = ""
    newsletter_opt_in: bool = False
    push_notification_opt_in: bool = False


class Login(WireModel):
    access_token: str = ""
    refresh_token: str = ""
    access_token_ttl_seconds: int = 0
    startup_data: StartupData = Field(default_factory=StartupData)


class SignupResponse(WireModel):
    login_response: Login = Field(default_factory=Login)
