import pytest
from unittest.mock import MagicMock, patch

from imc_backend.models.mod_auth import TokenType
from imc_backend.schemas.sch_auth import LoginRequest
from imc_backend.services.svc_auth import AuthService, AuthError
from imc_backend.services.svc_user import UserService
from imc_backend.validators.val_errors import BadRequestError, InternalServerError, InvalidTokenError, UnauthorizedError

class TestAuthService:
    @pytest.fixture
    def mock_users(self):
        return MagicMock()

    def test_login_success(self, mock_users, jwt_service, sample_user, plain_password):
        mock_users.find_by_email.return_value = sample_user

        result = AuthService.login(mock_users, jwt_service, LoginRequest(email="test@example.com", password=plain_password))

        assert jwt_service.get_payload(result.accessToken, TokenType.ACCESS).email == "test@example.com"
        assert jwt_service.get_payload(result.refreshToken, TokenType.REFRESH).email == "test@example.com"
        mock_users.find_by_email.assert_called_once_with("test@example.com")

    def test_login_unknown_email(self, mock_users, jwt_service, plain_password):
        mock_users.find_by_email.return_value = None

        with pytest.raises(UnauthorizedError) as exc:
            AuthService.login(mock_users, jwt_service, LoginRequest(email="nobody@example.com", password=plain_password))

        assert exc.value.status_code == 401
        assert exc.value.detail == AuthError.INVALID_EMAIL

    def test_login_wrong_password(self, mock_users, jwt_service, sample_user):
        mock_users.find_by_email.return_value = sample_user

        with pytest.raises(UnauthorizedError) as exc:
            AuthService.login(mock_users, jwt_service, LoginRequest(email="test@example.com", password="Wr0ng!Pass"))

        assert exc.value.detail == AuthError.INVALID_PASSWORD

    @pytest.mark.parametrize("header", [
        None,
        "",
        "bearer abc",
        "Token abc",
        "Bearer",
        "Bearer ",
        "Bearer  abc",
    ])
    def test_extract_bearer_token_malformed(self, header):
        with pytest.raises(BadRequestError) as exc:
            AuthService.extract_bearer_token(header)
        assert exc.value.status_code == 400
        assert exc.value.detail == AuthError.MALFORMED_HEADER

    def test_extract_bearer_token(self):
        assert AuthService.extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    def test_authenticate_request_success(self, mock_users, jwt_service, sample_user):
        mock_users.find_by_email.return_value = sample_user
        token = jwt_service.generate_token(sample_user.email)

        user = AuthService.authenticate_request(mock_users, jwt_service, f"Bearer {token}")

        assert user is sample_user

    def test_authenticate_request_deleted_user(self, mock_users, jwt_service):
        mock_users.find_by_email.return_value = None
        token = jwt_service.generate_token("gone@example.com")

        with pytest.raises(UnauthorizedError) as exc:
            AuthService.authenticate_request(mock_users, jwt_service, f"Bearer {token}")

        assert exc.value.detail == AuthError.USER_NOT_FOUND

    def test_authenticate_request_with_refresh_token(self, mock_users, jwt_service):
        token = jwt_service.generate_token("test@example.com", TokenType.REFRESH)

        with pytest.raises(InvalidTokenError):
            AuthService.authenticate_request(mock_users, jwt_service, f"Bearer {token}")

        mock_users.find_by_email.assert_not_called()

    def test_authenticate_request_store_failure_propagates(self, mock_users, jwt_service):
        mock_users.find_by_email.side_effect = InternalServerError("Error while finding user by email")
        token = jwt_service.generate_token("test@example.com")

        with pytest.raises(InternalServerError) as exc:
            AuthService.authenticate_request(mock_users, jwt_service, f"Bearer {token}")

        assert exc.value.status_code == 500

    def test_refresh_tokens(self, jwt_service):
        token = jwt_service.generate_token("test@example.com", TokenType.REFRESH)

        result = AuthService.refresh_tokens(jwt_service, f"Bearer {token}")

        assert jwt_service.get_payload(result.accessToken).email == "test@example.com"
        assert result.refreshToken is None

    def test_refresh_tokens_malformed_header(self, jwt_service):
        with pytest.raises(BadRequestError):
            AuthService.refresh_tokens(jwt_service, "Basic dXNlcjpwYXNz")

    def test_get_user_info(self, sample_user):
        info = AuthService.get_user_info(sample_user)
        assert info.model_dump() == {"nombre": "Test", "apellido": "User", "email": "test@example.com"}

    def test_login_looks_up_user_through_user_service(self, mock_users, jwt_service, sample_user, plain_password):
        with patch.object(UserService, "find_by_email", return_value=sample_user) as mock_find:
            AuthService.login(mock_users, jwt_service, LoginRequest(email="test@example.com", password=plain_password))

        mock_find.assert_called_once_with(mock_users, "test@example.com")

    def test_authenticate_request_looks_up_user_through_user_service(self, mock_users, jwt_service, sample_user):
        token = jwt_service.generate_token(sample_user.email)

        with patch.object(UserService, "find_by_email", return_value=sample_user) as mock_find:
            user = AuthService.authenticate_request(mock_users, jwt_service, f"Bearer {token}")

        assert user is sample_user
        mock_find.assert_called_once_with(mock_users, "test@example.com")
