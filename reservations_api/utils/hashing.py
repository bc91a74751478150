from passlib.context import CryptContext

BCRYPT_ROUNDS: int = 12

pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS
)


class HashingService:
    """Service for hashing and verifying user passwords."""

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash a password using bcrypt with salt.

        Args:
            password: The plain text password to hash

        Returns:
            The hashed password as a string
        """
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against its hash.

        Args:
            password: The plain text password to verify
            hashed_password: The stored hash to check against

        Returns:
            True if the password matches, False otherwise
        """
        try:
            return pwd_context.verify(password, hashed_password)
        except (ValueError, TypeError):
            return False
