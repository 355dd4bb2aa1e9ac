from typing import Optional
from imc_backend.models.mod_auth import TokenType
from imc_backend.models.mod_user import User
from imc_backend.repositories.rep_user import UserRepository
from imc_backend.schemas.sch_auth import LoginRequest, TokenPairResponse, RefreshTokenResponse, MeResponse
from imc_backend.services.svc_jwt import JwtService
from imc_backend.services.svc_password import PasswordHasher
from imc_backend.services.svc_user import UserService
from imc_backend.validators.val_errors import BadRequestError, UnauthorizedError
from imc_backend.configuration.monitor import log_event, start_span

BEARER_PREFIX = "Bearer "

class AuthError:
    """User-facing messages for authentication failures"""

    INVALID_EMAIL = "Login failed. Invalid email."
    INVALID_PASSWORD = "Login failed. Incorrect password."
    MALFORMED_HEADER = "The Authorization header is required and must have the format Bearer [token]."
    USER_NOT_FOUND = "User not found."

class AuthService:
    @staticmethod
    def extract_bearer_token(authorization: Optional[str]) -> str:
        """
        Extract the token from an Authorization header.

        The scheme must be exactly "Bearer " (case-sensitive, one space).

        Raises:
            BadRequestError: header missing, wrong scheme, or empty token
        """
        if not authorization or not authorization.startswith(BEARER_PREFIX):
            raise BadRequestError(AuthError.MALFORMED_HEADER)
        token = authorization.split(" ")[1]
        if not token:
            raise BadRequestError(AuthError.MALFORMED_HEADER)
        return token

    @staticmethod
    def login(users: UserRepository, jwt_service: JwtService, request: LoginRequest) -> TokenPairResponse:
        """
        Check credentials and issue an access/refresh token pair keyed on the user's email
        """
        with start_span("login"):
            user = UserService.find_by_email(users, request.email)
            if not user:
                log_event("Login failed", {"reason": "unknown_email"})
                raise UnauthorizedError(AuthError.INVALID_EMAIL)

            if not PasswordHasher.verify(request.password, user.password):
                log_event("Login failed", {"reason": "wrong_password", "user_id": user.id})
                raise UnauthorizedError(AuthError.INVALID_PASSWORD)

            log_event("Login succeeded", {"user_id": user.id})
            return TokenPairResponse(
                accessToken=jwt_service.generate_token(user.email),
                refreshToken=jwt_service.generate_token(user.email, TokenType.REFRESH)
            )

    @staticmethod
    def authenticate_request(users: UserRepository, jwt_service: JwtService, authorization: Optional[str]) -> User:
        """
        Resolve the user behind an access token. The user is looked up on
        every request, so tokens of deleted users stop working immediately.
        """
        token = AuthService.extract_bearer_token(authorization)
        payload = jwt_service.get_payload(token, TokenType.ACCESS)

        user = UserService.find_by_email(users, payload.email)
        if not user:
            raise UnauthorizedError(AuthError.USER_NOT_FOUND)
        return user

    @staticmethod
    def refresh_tokens(jwt_service: JwtService, authorization: Optional[str]) -> RefreshTokenResponse:
        """
        Get a new access token (and, close to expiry, a new refresh token)
        from the refresh token in the Authorization header
        """
        with start_span("refresh_tokens"):
            token = AuthService.extract_bearer_token(authorization)
            return jwt_service.refresh_token(token)

    @staticmethod
    def get_user_info(user: User) -> MeResponse:
        return MeResponse(nombre=user.firstName, apellido=user.lastName, email=user.email)
