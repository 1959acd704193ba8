"""
User service.

Admin account management. Internal admins manage every account; other
users can only read and update themselves.

Dependencies: franchise_site.boundary.db.CRUD, franchise_site.application.services.auth_service
System role: Admin account orchestration with access rules
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.application.services.audit_service import AuditService, snapshot
from franchise_site.application.services.auth_service import hash_password, is_internal_admin
from franchise_site.boundary.db.CRUD.user_crud import user_crud
from franchise_site.boundary.db.models.user_model import UserModel
from franchise_site.configs.site import AuthSettings
from franchise_site.core.exceptions import ConflictError, NotFoundError, PermissionDeniedError

logger = logging.getLogger(__name__)

COLLECTION = "users"


class UserService:
    """User CRUD with access rules applied for the acting user."""

    def __init__(
        self,
        db: AsyncSession,
        settings: AuthSettings,
        audit: AuditService | None = None,
    ) -> None:
        self.db = db
        self.settings = settings
        self.audit = audit or AuditService(db)

    def _is_internal(self, actor: UserModel) -> bool:
        return is_internal_admin(actor.email, self.settings)

    def _require_internal(self, actor: UserModel) -> None:
        if not self._is_internal(actor):
            raise PermissionDeniedError("Only internal admins can manage users")

    def _require_self_or_internal(self, actor: UserModel, user_id: UUID) -> None:
        if actor.id != user_id and not self._is_internal(actor):
            raise PermissionDeniedError("You can only access your own account")

    async def _check_email(self, email: str, current_id: UUID | None = None) -> str:
        email = email.strip().lower()
        existing = await user_crud.get_by_email(self.db, email)
        if existing is not None and existing.id != current_id:
            raise ConflictError("A user with this email already exists", field="email")
        return email

    async def list_users(self, actor: UserModel) -> list[UserModel]:
        """Every user for internal admins, only themselves otherwise."""
        if not self._is_internal(actor):
            return [actor]
        return list(await user_crud.get_all(self.db))

    async def get_user(self, actor: UserModel, user_id: UUID) -> UserModel:
        self._require_self_or_internal(actor, user_id)
        user = await user_crud.get_by_id(self.db, user_id)
        if user is None:
            raise NotFoundError(COLLECTION, user_id)
        return user

    async def create_user(
        self,
        actor: UserModel | None,
        email: str,
        password: str,
        name: str | None = None,
        is_active: bool = True,
    ) -> UserModel:
        """
        Create a user.

        Args:
            actor: Acting user (None only for bootstrap scripts)
            email: Login email
            password: Plain password, stored as a bcrypt hash
            name: Display name
            is_active: Whether the account can log in

        Raises:
            PermissionDeniedError: Actor is not an internal admin
            ConflictError: Email already registered
        """
        if actor is not None:
            self._require_internal(actor)
        email = await self._check_email(email)
        user = await user_crud.create(
            self.db,
            email=email,
            name=name,
            password_hash=hash_password(password),
            is_active=is_active,
        )
        logger.info("User created", extra={"user_id": str(user.id)})
        await self.audit.record_create(COLLECTION, user.id)
        return user

    async def update_user(self, actor: UserModel, user_id: UUID, **fields: Any) -> UserModel:
        user = await self.get_user(actor, user_id)
        before = snapshot(user)

        updates: dict[str, Any] = {}
        if fields.get("email"):
            updates["email"] = await self._check_email(fields["email"], current_id=user.id)
        if "name" in fields:
            updates["name"] = fields["name"]
        if fields.get("password"):
            updates["password_hash"] = hash_password(fields["password"])
        if fields.get("is_active") is not None:
            updates["is_active"] = fields["is_active"]

        user = await user_crud.update(self.db, user, **updates)
        await self.audit.record_update(COLLECTION, user.id, before, snapshot(user))
        return user

    async def delete_user(self, actor: UserModel, user_id: UUID) -> None:
        self._require_internal(actor)
        user = await self.get_user(actor, user_id)
        before = snapshot(user)
        await user_crud.delete_by_id(self.db, user_id)
        logger.info("User deleted", extra={"user_id": str(user_id)})
        await self.audit.record_delete(COLLECTION, before)
