import pytest
from unittest.mock import MagicMock

from imc_backend.models.mod_user import User
from imc_backend.services.svc_jwt import JwtService
from imc_backend.services.svc_password import PasswordHasher

TEST_PASSWORD = "Str0ng!Pass"

@pytest.fixture
def plain_password():
    return TEST_PASSWORD

@pytest.fixture(scope="session")
def password_hash():
    # Lowest bcrypt cost keeps the suite fast
    return PasswordHasher.hash(TEST_PASSWORD, rounds=4)

@pytest.fixture
def jwt_service():
    return JwtService(
        access_secret="test-access-secret",
        refresh_secret="test-refresh-secret",
        access_expire_minutes=15,
        refresh_expire_minutes=1440
    )

@pytest.fixture
def sample_user(password_hash):
    return User(
        id="user123",
        email="test@example.com",
        password=password_hash,
        firstName="Test",
        lastName="User"
    )

@pytest.fixture
def mock_db():
    return MagicMock()
