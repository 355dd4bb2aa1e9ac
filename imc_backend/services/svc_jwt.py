from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from imc_backend.configuration.config import Config
from imc_backend.configuration.monitor import log_event
from imc_backend.models.mod_auth import TokenPayload, TokenType
from imc_backend.schemas.sch_auth import RefreshTokenResponse
from imc_backend.validators.val_errors import (
    InternalServerError,
    InvalidTokenError,
    MissingExpirationError,
    UnauthorizedError
)

# A refresh token with less than this many minutes left is rotated
REFRESH_ROTATION_THRESHOLD_MINUTES = 20

class JwtService:
    """
    Signs and verifies the two token classes.

    Access and refresh tokens each have their own secret and lifetime.
    """

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        access_expire_minutes: int = 15,
        refresh_expire_minutes: int = 1440,
        algorithm: str = "HS256"
    ):
        if not access_secret or not refresh_secret:
            raise ValueError("Both access and refresh secrets are required")
        if access_secret == refresh_secret:
            raise ValueError("Access and refresh tokens must use different secrets")
        self.secrets = {TokenType.ACCESS: access_secret, TokenType.REFRESH: refresh_secret}
        self.lifetimes = {
            TokenType.ACCESS: timedelta(minutes=access_expire_minutes),
            TokenType.REFRESH: timedelta(minutes=refresh_expire_minutes)
        }
        self.algorithm = algorithm

    @classmethod
    def from_config(cls) -> "JwtService":
        """Build the service from environment configuration"""
        if not Config.JWT_ACCESS_SECRET or not Config.JWT_REFRESH_SECRET:
            raise InternalServerError("Missing JWT environment variables", context="jwt_config")
        try:
            return cls(
                access_secret=Config.JWT_ACCESS_SECRET,
                refresh_secret=Config.JWT_REFRESH_SECRET,
                access_expire_minutes=Config.JWT_ACCESS_EXPIRATION_MINUTES,
                refresh_expire_minutes=Config.JWT_REFRESH_EXPIRATION_MINUTES,
                algorithm=Config.JWT_ALGORITHM
            )
        except ValueError as e:
            raise InternalServerError(str(e), context="jwt_config")

    @staticmethod
    def _get_current_time() -> datetime:
        """Get current time as UTC timezone-aware datetime"""
        return datetime.now(timezone.utc)

    def generate_token(self, email: str, token_type: TokenType = TokenType.ACCESS) -> str:
        now = self._get_current_time()
        claims = {
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int((now + self.lifetimes[token_type]).timestamp())
        }
        return jwt.encode(claims, self.secrets[token_type], algorithm=self.algorithm)

    def _decode(self, token: str, token_type: TokenType) -> dict:
        try:
            return jwt.decode(token, self.secrets[token_type], algorithms=[self.algorithm])
        except JWTError as e:
            raise InvalidTokenError(f"Invalid token: {str(e)}")

    def get_payload(self, token: str, token_type: TokenType = TokenType.ACCESS) -> TokenPayload:
        """
        Verify signature and expiry of a token and return its payload.

        Raises:
            InvalidTokenError: bad signature, expired token, or no email claim
        """
        claims = self._decode(token, token_type)
        if not isinstance(claims, dict) or not isinstance(claims.get("email"), str):
            raise InvalidTokenError("Invalid token: payload does not carry an email")
        return TokenPayload(**claims)

    def refresh_token(self, refresh_token: str) -> RefreshTokenResponse:
        """
        Issue a new access token from a refresh token, rotating the refresh
        token too when it expires in less than REFRESH_ROTATION_THRESHOLD_MINUTES.
        """
        try:
            payload = self.get_payload(refresh_token, TokenType.REFRESH)
        except UnauthorizedError:
            raise UnauthorizedError("Invalid refresh token")

        if payload.exp is None:
            raise MissingExpirationError()

        minutes_remaining = (payload.exp - self._get_current_time().timestamp()) / 60

        if minutes_remaining < REFRESH_ROTATION_THRESHOLD_MINUTES:
            log_event("Refresh token rotated", {"minutes_remaining": round(minutes_remaining, 2)})
            return RefreshTokenResponse(
                accessToken=self.generate_token(payload.email),
                refreshToken=self.generate_token(payload.email, TokenType.REFRESH)
            )

        return RefreshTokenResponse(accessToken=self.generate_token(payload.email))
