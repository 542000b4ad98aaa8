from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from fleetadmin.app.repositories.errors import DuplicateEntityError
from fleetadmin.app.repositories.user_repository import IUserRepository
from fleetadmin.domain.base import utcnow
from fleetadmin.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all(self) -> List[User]:
        """Get all users that are not soft deleted"""
        stmt = select(User).where(col(User.deleted_at).is_(None)).order_by(col(User.id))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email, col(User.deleted_at).is_(None))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id, col(User.deleted_at).is_(None))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateEntityError(f"Email already registered: {user.email}") from exc
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        user.updated_at = utcnow()
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateEntityError(f"Email already registered: {user.email}") from exc
        await self.session.refresh(user)
        return user
