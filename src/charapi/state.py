"""Per-application state: configuration plus the in-memory stores."""

from dataclasses import dataclass, field

from .config import AppConfig
from .repositories import CharacterRepository, RevokedTokenRepository, UserRepository


@dataclass
class AppState:
    """
    Everything a request handler may read or mutate.

    One instance is created per FastAPI application and kept on
    `app.state.store`, so two apps never share users, characters or
    revoked tokens.
    """
    config: AppConfig
    users: UserRepository = field(default_factory=UserRepository)
    characters: CharacterRepository = field(default_factory=CharacterRepository)
    revoked_tokens: RevokedTokenRepository = field(default_factory=RevokedTokenRepository)
