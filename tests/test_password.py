from fastapi.testclient import TestClient
from sqlmodel import Session

from app.db.repositories.users import UserRepository
from app.main import create_app
from app.security.password import PasswordHasher


def test_hash_is_salted_and_verifiable(hasher):
    first = hasher.hash("s3cret-pass")
    second = hasher.hash("s3cret-pass")
    assert first != "s3cret-pass"
    assert first != second
    assert hasher.verify("s3cret-pass", first)
    assert hasher.verify("s3cret-pass", second)


def test_wrong_password_does_not_verify(hasher):
    assert not hasher.verify("wrong", hasher.hash("s3cret-pass"))


def test_missing_hash_never_verifies(hasher):
    assert not hasher.verify("anything", None)
    assert not hasher.verify("anything", "")


def test_cost_factor_is_the_configured_rounds():
    assert PasswordHasher(rounds=5).hash("s3cret-pass").startswith("$2b$05$")


def test_app_hashes_with_its_own_settings_rounds(settings, engine):
    app = create_app(settings.model_copy(update={"BCRYPT_ROUNDS": 5}), engine)
    with TestClient(app) as client:
        resp = client.post(
            "/auth/register",
            json={"username": "carol", "email": "carol@example.com", "password": "carol-password"},
        )
        assert resp.status_code == 201, resp.text
        # lu avant la fermeture du client : le shutdown libère la base en mémoire
        with Session(engine) as session:
            carol = UserRepository(session).get_by_email("carol@example.com")
            assert carol.hashed_password.startswith("$2b$05$")
