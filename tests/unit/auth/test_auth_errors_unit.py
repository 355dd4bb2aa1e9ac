import unittest
from unittest.mock import patch, MagicMock
from fastapi.testclient import TestClient

from imc_backend.backmain import app
from imc_backend.dependencies.dep_auth import get_jwt_service, get_user_repository, get_bmi_repository
from imc_backend.schemas.sch_errors import FieldError
from imc_backend.services.svc_jwt import JwtService
from imc_backend.validators.val_errors import (
    FieldValidationError,
    InternalServerError,
    MissingExpirationError,
    UnauthorizedError,
    raise_if_errors
)

class TestErrorTypes(unittest.TestCase):
    """Status codes and payloads of the error types"""

    def test_field_validation_error_detail(self):
        error = FieldValidationError([FieldError(field="altura", message="altura must be at least 0.01")])
        self.assertEqual(error.status_code, 400)
        self.assertEqual(error.detail["message"], "Validation failed")
        self.assertEqual(error.detail["errors"], [{"field": "altura", "message": "altura must be at least 0.01"}])

    def test_raise_if_errors_without_errors(self):
        raise_if_errors([])

    def test_raise_if_errors_with_errors(self):
        with self.assertRaises(FieldValidationError):
            raise_if_errors([FieldError(field="peso", message="peso must be a number")])

    def test_unauthorized_carries_bearer_challenge(self):
        error = UnauthorizedError()
        self.assertEqual(error.status_code, 401)
        self.assertEqual(error.headers, {"WWW-Authenticate": "Bearer"})

    def test_missing_expiration_is_unauthorized(self):
        self.assertIsInstance(MissingExpirationError(), UnauthorizedError)

class TestJwtConfiguration(unittest.TestCase):
    @patch("imc_backend.services.svc_jwt.Config")
    def test_missing_secrets(self, mock_config):
        mock_config.JWT_ACCESS_SECRET = None
        mock_config.JWT_REFRESH_SECRET = "refresh"
        with self.assertRaises(InternalServerError) as ctx:
            JwtService.from_config()
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(ctx.exception.context, "jwt_config")

    @patch("imc_backend.services.svc_jwt.Config")
    def test_same_secret_for_both_token_types(self, mock_config):
        mock_config.JWT_ACCESS_SECRET = "shared"
        mock_config.JWT_REFRESH_SECRET = "shared"
        mock_config.JWT_ACCESS_EXPIRATION_MINUTES = 15
        mock_config.JWT_REFRESH_EXPIRATION_MINUTES = 1440
        mock_config.JWT_ALGORITHM = "HS256"
        with self.assertRaises(InternalServerError):
            JwtService.from_config()

class TestApplicationErrorHandling(unittest.TestCase):
    """Error responses as served by the assembled application"""

    def setUp(self):
        self.users = MagicMock()
        self.records = MagicMock()
        self.jwt_service = JwtService(access_secret="access", refresh_secret="refresh")
        app.dependency_overrides[get_user_repository] = lambda: self.users
        app.dependency_overrides[get_bmi_repository] = lambda: self.records
        app.dependency_overrides[get_jwt_service] = lambda: self.jwt_service
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_protected_route_without_header(self):
        response = self.client.get("/imc/historial")
        self.assertEqual(response.status_code, 400)

    def test_protected_route_with_invalid_token(self):
        response = self.client.get("/users", headers={"Authorization": "Bearer invalid"})
        self.assertEqual(response.status_code, 401)
        self.users.find_all.assert_not_called()

    def test_body_validation_is_bad_request(self):
        response = self.client.post("/users/register", json={"email": "broken"})
        self.assertEqual(response.status_code, 400)
        fields = [error["field"] for error in response.json()["detail"]["errors"]]
        self.assertIn("email", fields)
        self.assertIn("password", fields)

    def test_store_failure_is_internal_error(self):
        self.users.find_by_email.side_effect = InternalServerError("Error while finding user by email")
        access = self.jwt_service.generate_token("test@example.com")

        response = self.client.get("/auth/me", headers={"Authorization": f"Bearer {access}"})

        self.assertEqual(response.status_code, 500)

    def test_unknown_route(self):
        response = self.client.get("/nowhere")
        self.assertEqual(response.status_code, 404)

if __name__ == "__main__":
    unittest.main()
