from fastapi import APIRouter, Depends
from typing import List
from imc_backend.schemas.sch_user import RegisterRequest, UpdateUserRequest, UserResponse
from imc_backend.schemas.sch_errors import ErrorDetail, MessageResponse, ValidationErrorResponse
from imc_backend.services.svc_user import UserService
from imc_backend.repositories.rep_user import UserRepository
from imc_backend.dependencies.dep_auth import get_current_user, get_user_repository
from imc_backend.models.mod_user import User

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={401: {"model": ErrorDetail}},
)

@router.get('', response_model=List[UserResponse])
def list_users(
    users: UserRepository = Depends(get_user_repository),
    current_user: User = Depends(get_current_user)
):
    """
    List all registered users. Passwords are never included.
    """
    return UserService.list_users(users)

@router.post('/register', response_model=UserResponse, status_code=201, responses={400: {"model": ValidationErrorResponse}})
def register(
    registration: RegisterRequest,
    users: UserRepository = Depends(get_user_repository)
):
    """
    Register a new user.

    - The email must not be registered already
    - The password must be strong (8+ characters, upper and lower case, a number,
      a special character, and no part of the email or name)
    """
    return UserService.register(users, registration)

@router.patch('/{user_id}', response_model=UserResponse, responses={400: {"model": ValidationErrorResponse}, 404: {"model": ErrorDetail}})
def update_user(
    user_id: str,
    changes: UpdateUserRequest,
    users: UserRepository = Depends(get_user_repository),
    current_user: User = Depends(get_current_user)
):
    """
    Update a user. All fields are optional; a new password is hashed before it is stored.
    """
    return UserService.update(users, user_id, changes)

@router.delete('/{user_id}', response_model=MessageResponse, responses={404: {"model": ErrorDetail}})
def delete_user(
    user_id: str,
    users: UserRepository = Depends(get_user_repository),
    current_user: User = Depends(get_current_user)
):
    """
    Delete a user. Tokens already issued to the user stop working on the next request.
    """
    return UserService.delete(users, user_id)
