"""
Tests unitaires des services, repositories mockés (pas de base).
"""

from unittest.mock import Mock

import pytest

from app.api.dependencies import get_user_service
from app.core.errors import Conflict, Forbidden, NotFound, Unauthenticated
from app.features.authentication.schemas import LoginIn, RegisterIn
from app.features.authentication.services import AuthService
from app.features.users.schemas import UserCreate, UserPatch
from app.features.users.services import UserService
from app.security.tokens import JWTSettings


@pytest.fixture
def user_repo():
    return Mock()


def test_patch_forbidden_before_touching_the_database(user_repo):
    svc = UserService(user_repo, Mock(), Mock())
    with pytest.raises(Forbidden):
        svc.patch(1, UserPatch(username="mallory"), actor_id=2)
    user_repo.get.assert_not_called()
    user_repo.apply.assert_not_called()


def test_patch_only_sends_present_fields(user_repo):
    user = Mock(id=1)
    user_repo.get.return_value = user
    user_repo.find_conflicting.return_value = None
    svc = UserService(user_repo, Mock(), Mock())

    svc.patch(1, UserPatch(email="new@example.com"), actor_id=1)

    _, changes = user_repo.apply.call_args.args
    assert changes["email"] == "new@example.com"
    assert "username" not in changes
    assert "updated_at" in changes


def test_get_missing_user(user_repo):
    user_repo.get.return_value = None
    with pytest.raises(NotFound):
        UserService(user_repo, Mock(), Mock()).get(5)


def test_register_conflict_does_not_insert(user_repo):
    user_repo.find_conflicting.return_value = Mock()
    svc = AuthService(user_repo=user_repo, jwt_settings=JWTSettings(secret="x"), hasher=Mock())
    with pytest.raises(Conflict):
        svc.register(RegisterIn(username="alice", email="alice@example.com", password="alice-password"))
    user_repo.add.assert_not_called()


def test_login_unknown_email(user_repo):
    user_repo.get_by_email.return_value = None
    svc = AuthService(user_repo=user_repo, jwt_settings=JWTSettings(secret="x"), hasher=Mock())
    with pytest.raises(Unauthenticated) as exc_info:
        svc.login(LoginIn(email="ghost@example.com", password="whatever"))
    assert exc_info.value.message == "Invalid email or password"


def test_database_failure_surfaces_as_opaque_500(app, client):
    broken = Mock()
    broken.list.side_effect = RuntimeError("Lost connection to MySQL server at 10.0.0.5")
    app.dependency_overrides[get_user_service] = lambda: broken

    resp = client.get("/users")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch users"}


def test_delete_reports_missing_user_from_affected_rows(user_repo):
    user_repo.delete_by_id.return_value = 0
    with pytest.raises(NotFound):
        UserService(user_repo, Mock(), Mock()).delete(9)
    user_repo.delete_by_id.assert_called_once_with(9)


def test_user_service_hashes_with_injected_hasher(user_repo):
    user_repo.find_conflicting.return_value = None
    hasher = Mock()
    hasher.hash.return_value = "hashed"
    svc = UserService(user_repo, Mock(), hasher)

    svc.create(UserCreate(username="carol", email="carol@example.com", password="carol-password"))

    hasher.hash.assert_called_once_with("carol-password")
    assert user_repo.add.call_args.kwargs["hashed_password"] == "hashed"
