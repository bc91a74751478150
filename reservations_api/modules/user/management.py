"""User registration and credential checks."""

from sqlalchemy import func, select

from reservations_api.api.core.exceptions.base import BadRequestError
from reservations_api.api.core.messages import MessageCode
from reservations_api.core.base import BaseService
from reservations_api.database.models import User
from reservations_api.utils.hashing import HashingService


class UserManagementService(BaseService):
    async def get_user_by_id(self, user_id: str) -> User | None:
        return await self.db.get(User, user_id)

    async def get_user_by_user_name(self, user_name: str) -> User | None:
        """Look a user up by name, ignoring case."""
        stmt = select(User).where(func.lower(User.user_name) == user_name.lower())
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def register_user(
        self,
        user_name: str,
        email: str,
        password: str,
        name: str | None = None,
    ) -> User:
        """Create a user with a confirmed email.

        No confirmation message is sent; the address is trusted as given.
        """
        if await self.get_user_by_user_name(user_name):
            raise BadRequestError(
                MessageCode.USER_ALREADY_EXISTS,
                {"description": f"User name '{user_name}' is already taken."},
            )

        user = User(
            user_name=user_name,
            email=email,
            name=name,
            password_hash=HashingService.hash_password(password),
            email_confirmed=True,
        )
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)

        self.logger.info("Registered user", user_id=user.id)
        return user

    async def authenticate(self, user_name: str, password: str) -> User | None:
        """Return the user when the credentials match, otherwise ``None``."""
        user = await self.get_user_by_user_name(user_name)
        if not user or not HashingService.verify_password(password, user.password_hash):
            return None
        return user
