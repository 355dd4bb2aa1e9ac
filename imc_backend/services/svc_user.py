import uuid
from typing import List, Optional
from imc_backend.models.mod_user import User
from imc_backend.repositories.rep_user import UserRepository
from imc_backend.schemas.sch_errors import MessageResponse
from imc_backend.schemas.sch_user import RegisterRequest, UpdateUserRequest, UserResponse
from imc_backend.services.svc_password import PasswordHasher
from imc_backend.validators.val_errors import BadRequestError, NotFoundError
from imc_backend.validators.val_user import UserValidator
from imc_backend.configuration.monitor import log_event, log_exception, start_span

class UserService:
    @staticmethod
    def to_user_response(user: User) -> UserResponse:
        """Public view of a user, without the password hash"""
        return UserResponse(
            id=user.id,
            email=user.email,
            firstName=user.firstName,
            lastName=user.lastName
        )

    @staticmethod
    def list_users(users: UserRepository) -> List[UserResponse]:
        with start_span("list_users"):
            return [UserService.to_user_response(user) for user in users.find_all()]

    @staticmethod
    def find_by_email(users: UserRepository, email: str) -> Optional[User]:
        return users.find_by_email(email)

    @staticmethod
    def register(users: UserRepository, registration: RegisterRequest) -> UserResponse:
        try:
            with start_span("register_user"):
                log_event("Register user started")

                UserValidator.validate_password_strength(
                    registration.password,
                    registration.email,
                    registration.firstName,
                    registration.lastName
                )

                if UserService.find_by_email(users, registration.email):
                    raise BadRequestError("A user with that email already exists")

                user = User(
                    id=str(uuid.uuid4()),
                    email=registration.email,
                    password=PasswordHasher.hash(registration.password),
                    firstName=registration.firstName,
                    lastName=registration.lastName
                )
                saved = users.save(user)

                log_event("User registered successfully", {"user_id": saved.id})
                return UserService.to_user_response(saved)
        except Exception as e:
            log_exception(e, {"operation": "register_user"})
            raise

    @staticmethod
    def update(users: UserRepository, user_id: str, changes: UpdateUserRequest) -> UserResponse:
        """
        Apply a partial update. A new password is strength-checked and hashed
        before it is stored.
        """
        try:
            with start_span("update_user", attributes={"user_id": user_id}):
                log_event("Update user started", {"user_id": user_id})

                existing = users.find_by_id(user_id)
                if not existing:
                    raise NotFoundError("Could not update the user. Check that the ID exists.")

                update_data = changes.model_dump(exclude_unset=True, exclude_none=True)

                new_email = update_data.get("email")
                if new_email and new_email != existing.email:
                    owner = UserService.find_by_email(users, new_email)
                    if owner and owner.id != user_id:
                        raise BadRequestError("A user with that email already exists")

                if "password" in update_data:
                    UserValidator.validate_password_strength(
                        update_data["password"],
                        update_data.get("email", existing.email),
                        update_data.get("firstName", existing.firstName),
                        update_data.get("lastName", existing.lastName)
                    )
                    update_data["password"] = PasswordHasher.hash(update_data["password"])

                updated = users.update(user_id, update_data)
                if not updated:
                    raise NotFoundError("Could not update the user. Check that the ID exists.")

                log_event("User updated successfully", {"user_id": user_id, "fields": ",".join(sorted(update_data))})
                return UserService.to_user_response(updated)
        except Exception as e:
            log_exception(e, {"operation": "update_user", "user_id": user_id})
            raise

    @staticmethod
    def delete(users: UserRepository, user_id: str) -> MessageResponse:
        try:
            with start_span("delete_user", attributes={"user_id": user_id}):
                if not users.delete(user_id):
                    raise NotFoundError("Could not delete the user. Check that the ID exists.")

                log_event("User deleted successfully", {"user_id": user_id})
                return MessageResponse(message=f"User ID {user_id} deleted.")
        except Exception as e:
            log_exception(e, {"operation": "delete_user", "user_id": user_id})
            raise
