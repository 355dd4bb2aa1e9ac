from functools import lru_cache
from typing import Optional
from fastapi import Depends, Header
from azure.cosmos import ContainerProxy
from imc_backend.configuration.database import get_users_container, get_bmi_records_container
from imc_backend.models.mod_user import User
from imc_backend.repositories.rep_bmi import BmiRecordRepository
from imc_backend.repositories.rep_user import UserRepository
from imc_backend.services.svc_auth import AuthService
from imc_backend.services.svc_jwt import JwtService

@lru_cache(maxsize=1)
def get_jwt_service() -> JwtService:
    """
    Build the JwtService from configuration once and reuse it.
    Raises InternalServerError when the JWT secrets are not configured.
    """
    return JwtService.from_config()

def get_user_repository(db: ContainerProxy = Depends(get_users_container)) -> UserRepository:
    return UserRepository(db)

def get_bmi_repository(db: ContainerProxy = Depends(get_bmi_records_container)) -> BmiRecordRepository:
    return BmiRecordRepository(db)

def get_current_user(
    authorization: Optional[str] = Header(default=None),
    users: UserRepository = Depends(get_user_repository),
    jwt_service: JwtService = Depends(get_jwt_service)
) -> User:
    """
    Get the current authenticated user from the access token in the
    Authorization header. This is the main dependency to be used in protected endpoints.
    """
    return AuthService.authenticate_request(users, jwt_service, authorization)