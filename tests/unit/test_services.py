"""Unit tests for AuthService and CharacterService."""

from datetime import timedelta

import pytest

from charapi.config import AppConfig
from charapi.core.exceptions import (
    EmailAlreadyExistsError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidTokenError,
    ResourceNotFoundError,
    ValidationError,
)
from charapi.core.security import create_jwt_token, decode_jwt_token
from charapi.repositories import CharacterRepository, RevokedTokenRepository, UserRepository
from charapi.services import AuthContext, AuthService, CharacterService


SECRET = "service_test_secret_0123456789abcdef"


@pytest.fixture
def auth_service():
    return AuthService(UserRepository(), RevokedTokenRepository(), AppConfig(jwt_secret=SECRET))


@pytest.fixture
def character_service():
    return CharacterService(CharacterRepository())


class TestAuthService:

    def test_register(self, auth_service):
        user = auth_service.register("a@example.com", "abcdef")
        assert user.role == "user"
        assert auth_service.user_repo.email_exists("a@example.com")

    def test_register_duplicate(self, auth_service):
        auth_service.register("a@example.com", "abcdef")
        with pytest.raises(EmailAlreadyExistsError):
            auth_service.register("a@example.com", "ghijkl")

    def test_login_issues_tokens(self, auth_service):
        user = auth_service.register("a@example.com", "abcdef")
        tokens = auth_service.login("a@example.com", "abcdef")

        access = decode_jwt_token(tokens.access_token, SECRET)
        refresh = decode_jwt_token(tokens.refresh_token, SECRET)
        assert access.sub == str(user.id)
        assert access.role == "user"
        assert access.type == "access"
        assert refresh.type == "refresh"
        # 1h access vs 1d refresh
        assert refresh.exp - access.exp > timedelta(hours=22).total_seconds()
        assert auth_service.user_repo.get_by_email("a@example.com").refresh_token == tokens.refresh_token

    def test_login_bad_credentials(self, auth_service):
        auth_service.register("a@example.com", "abcdef")
        with pytest.raises(InvalidCredentialsError):
            auth_service.login("a@example.com", "wrong1")
        with pytest.raises(InvalidCredentialsError):
            auth_service.login("b@example.com", "abcdef")

    def test_login_unknown_email_still_checks_a_hash(self, auth_service, monkeypatch):
        checked = []

        def record(password, hashed):
            checked.append((password, hashed))
            return False

        monkeypatch.setattr("charapi.services.auth_service.verify_password", record)

        with pytest.raises(InvalidCredentialsError):
            auth_service.login("nobody@example.com", "abcdef")

        assert len(checked) == 1
        assert checked[0][0] == "abcdef"
        assert checked[0][1].startswith("$2")

    def test_authenticate(self, auth_service):
        user = auth_service.register("a@example.com", "abcdef")
        tokens = auth_service.login("a@example.com", "abcdef")

        context = auth_service.authenticate(tokens.access_token)

        assert context == AuthContext(
            user_id=user.id,
            email="a@example.com",
            role="user",
            token=tokens.access_token,
        )

    def test_authenticate_rejects_refresh_token(self, auth_service):
        auth_service.register("a@example.com", "abcdef")
        tokens = auth_service.login("a@example.com", "abcdef")
        with pytest.raises(InvalidTokenError):
            auth_service.authenticate(tokens.refresh_token)

    def test_authenticate_rejects_non_numeric_subject(self, auth_service):
        token = create_jwt_token(
            {"sub": "abc", "email": "a@example.com", "role": "user"},
            SECRET,
            timedelta(hours=1),
        )
        with pytest.raises(InvalidTokenError):
            auth_service.authenticate(token)

    def test_logout_revokes(self, auth_service):
        auth_service.register("a@example.com", "abcdef")
        tokens = auth_service.login("a@example.com", "abcdef")
        context = auth_service.authenticate(tokens.access_token)

        assert auth_service.logout(context) is True

        assert auth_service.user_repo.get_by_email("a@example.com").refresh_token is None
        with pytest.raises(ForbiddenError):
            auth_service.authenticate(tokens.access_token)

    def test_revoked_check_comes_before_signature_check(self, auth_service):
        auth_service.revoked_token_repo.add("not-even-a-jwt")
        with pytest.raises(ForbiddenError):
            auth_service.authenticate("not-even-a-jwt")

    def test_logout_unknown_user(self, auth_service):
        context = AuthContext(user_id=9, email="gone@example.com", role="user", token="t")
        assert auth_service.logout(context) is False
        assert auth_service.revoked_token_repo.is_revoked("t")


class TestCharacterService:

    def test_create_and_get(self, character_service):
        character = character_service.create_character(name="Aragorn", last_name="Elessar")
        assert character_service.get_character(character.id) == character
        assert character_service.list_characters() == [character]

    def test_get_missing(self, character_service):
        with pytest.raises(ResourceNotFoundError):
            character_service.get_character(1)

    def test_update(self, character_service):
        character = character_service.create_character(name="Aragorn", last_name="Elessar")
        updated = character_service.update_character(character.id, name="Strider")
        assert updated.name == "Strider"
        assert updated.last_name == "Elessar"

    def test_update_missing(self, character_service):
        with pytest.raises(ResourceNotFoundError):
            character_service.update_character(1, name="Strider")
        assert character_service.list_characters() == []

    def test_update_nothing(self, character_service):
        character = character_service.create_character(name="Aragorn", last_name="Elessar")
        with pytest.raises(ValidationError):
            character_service.update_character(character.id)

    def test_delete(self, character_service):
        character = character_service.create_character(name="Aragorn", last_name="Elessar")
        character_service.delete_character(character.id)
        with pytest.raises(ResourceNotFoundError):
            character_service.delete_character(character.id)
