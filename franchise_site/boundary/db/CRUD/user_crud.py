"""
User CRUD operations.

Dependencies: sqlalchemy, franchise_site.boundary.db.models
System role: Admin user persistence operations
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.boundary.db.CRUD.base_crud import BaseCRUD
from franchise_site.boundary.db.models.user_model import UserModel


class UserCRUD(BaseCRUD[UserModel]):
    """CRUD operations for UserModel with email lookup."""

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    async def get_by_email(self, session: AsyncSession, email: str) -> UserModel | None:
        """
        Retrieve a user by email (case-insensitive).

        Args:
            session: Async database session
            email: Login email

        Returns:
            UserModel if found, None otherwise
        """
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.strip().lower())
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


user_crud = UserCRUD()
