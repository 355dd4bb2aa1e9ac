import re
from typing import List, Optional
from imc_backend.schemas.sch_errors import FieldError
from imc_backend.validators.val_errors import raise_if_errors

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_BYTES = 72
SPECIAL_CHARACTERS = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")
WEAK_PATTERNS = [
    re.compile(r"123456"),
    re.compile(r"password", re.IGNORECASE),
    re.compile(r"qwerty", re.IGNORECASE),
    re.compile(r"abc123", re.IGNORECASE),
    re.compile(r"111111"),
    re.compile(r"000000"),
]

class UserValidator:
    @staticmethod
    def password_errors(password: str, email: str, first_name: Optional[str], last_name: Optional[str]) -> List[FieldError]:
        """Check password strength; returns at most one error, the first rule broken"""
        def error(message: str) -> List[FieldError]:
            return [FieldError(field="password", message=message)]

        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            return error(f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
        if len(password) < MIN_PASSWORD_LENGTH:
            return error(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
        if not re.search(r"[A-Z]", password):
            return error("Password must contain at least one uppercase letter")
        if not re.search(r"[a-z]", password):
            return error("Password must contain at least one lowercase letter")
        if not re.search(r"\d", password):
            return error("Password must contain at least one number")
        if not SPECIAL_CHARACTERS.search(password):
            return error("Password must contain at least one special character")

        password_lower = password.lower()
        email_user = email.split("@")[0].lower()
        if email_user and email_user in password_lower:
            return error("Password must not contain part of the email")
        if first_name and first_name.lower() in password_lower:
            return error("Password must not contain the first name")
        if last_name and last_name.lower() in password_lower:
            return error("Password must not contain the last name")

        for pattern in WEAK_PATTERNS:
            if pattern.search(password):
                return error("Password contains a common insecure pattern")
        return []

    @staticmethod
    def validate_password_strength(password: str, email: str, first_name: Optional[str], last_name: Optional[str]):
        raise_if_errors(UserValidator.password_errors(password, email, first_name, last_name))
