"""Session (login) models."""

from pydantic import Field

from tasty_client.models.common import TastyModel


class LoginInfo(TastyModel):
    """Credentials posted to create a session.

    Either ``password`` or a previously issued ``remember_token`` is sent.
    """

    login: str
    password: str | None = None
    remember_me: bool = False
    remember_token: str | None = None


class User(TastyModel):
    """The user a session belongs to."""

    email: str = ""
    username: str = ""
    external_id: str = ""


class SessionResult(TastyModel):
    """Result of creating or validating a session."""

    user: User = Field(default_factory=User)
    session_token: str | None = None
    remember_token: str | None = None
