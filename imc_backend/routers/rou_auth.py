from typing import Optional
from fastapi import APIRouter, Depends, Header
from imc_backend.schemas.sch_auth import LoginRequest, TokenPairResponse, RefreshTokenResponse, MeResponse
from imc_backend.schemas.sch_errors import ErrorDetail, ValidationErrorResponse
from imc_backend.services.svc_auth import AuthService
from imc_backend.services.svc_jwt import JwtService
from imc_backend.repositories.rep_user import UserRepository
from imc_backend.dependencies.dep_auth import get_current_user, get_jwt_service, get_user_repository
from imc_backend.models.mod_user import User

router = APIRouter(prefix="/auth", tags=["Authentication"])

@router.post("/login", response_model=TokenPairResponse, responses={400: {"model": ValidationErrorResponse}, 401: {"model": ErrorDetail}})
def login(
    request: LoginRequest,
    users: UserRepository = Depends(get_user_repository),
    jwt_service: JwtService = Depends(get_jwt_service)
):
    """
    Login with email and password

    Returns an access token and a refresh token.

    Possible errors:
    - 400: Invalid email syntax or empty password
    - 401: Unknown email or incorrect password
    """
    return AuthService.login(users, jwt_service, request)

@router.get(
    "/tokens",
    response_model=RefreshTokenResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorDetail}, 401: {"model": ErrorDetail}}
)
def refresh_tokens(
    authorization: Optional[str] = Header(default=None),
    jwt_service: JwtService = Depends(get_jwt_service)
):
    """
    Get a new access token using the refresh token sent as `Authorization: Bearer <refresh-token>`.

    - A new refresh token is included only when the current one expires in less than 20 minutes

    Possible errors:
    - 400: Missing or malformed Authorization header
    - 401: Invalid or expired refresh token
    """
    return AuthService.refresh_tokens(jwt_service, authorization)

@router.get("/me", response_model=MeResponse, responses={400: {"model": ErrorDetail}, 401: {"model": ErrorDetail}})
def get_current_user_info(current_user: User = Depends(get_current_user)):
    """
    Get information about the currently authenticated user based on their access token.
    """
    return AuthService.get_user_info(current_user)
