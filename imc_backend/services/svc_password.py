import bcrypt
from imc_backend.configuration.config import Config

# bcrypt only takes the first 72 bytes of a password into account
MAX_PASSWORD_BYTES = 72

class PasswordHasher:
    @staticmethod
    def hash(password: str, rounds: int = None) -> str:
        """Salted bcrypt hash of a plain password"""
        salt = bcrypt.gensalt(rounds=rounds or Config.BCRYPT_ROUNDS)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def verify(password: str, password_hash: str) -> bool:
        """Constant-time comparison of a plain password against a stored hash"""
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
