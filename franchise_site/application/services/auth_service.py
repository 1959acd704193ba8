"""
Authentication service.

Password hashing (bcrypt), admin token issuing and verification (HS256 JWT)
and the internal-admin rule used for user management.

Dependencies: bcrypt, jwt, franchise_site.boundary.db.CRUD
System role: Admin authentication
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import bcrypt
import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.boundary.db.CRUD.user_crud import user_crud
from franchise_site.boundary.db.models.user_model import UserModel
from franchise_site.configs.site import AuthSettings
from franchise_site.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def is_internal_admin(email: str | None, settings: AuthSettings) -> bool:
    """
    Check whether an email belongs to an internal admin.

    Internal admins are listed explicitly or share a configured domain.
    """
    if not email:
        return False
    email = email.strip().lower()
    if email in {e.strip().lower() for e in settings.internal_admin_emails}:
        return True
    domain = email.rpartition("@")[2]
    return domain in {d.strip().lower().lstrip("@") for d in settings.internal_admin_domains}


class AuthService:
    """Login and token verification."""

    def __init__(self, db: AsyncSession, settings: AuthSettings) -> None:
        """
        Initialize auth service.

        Args:
            db: Async SQLAlchemy session
            settings: Token signing and cookie configuration
        """
        self.db = db
        self.settings = settings

    def create_token(self, user: UserModel) -> tuple[str, datetime]:
        """
        Issue a signed admin token.

        Returns:
            tuple[str, datetime]: (token, expires_at)
        """
        issued_at = datetime.now(timezone.utc)
        expires_at = issued_at + timedelta(minutes=self.settings.token_ttl_minutes)
        payload = {
            "sub": str(user.id),
            "email": user.email,
            "iat": issued_at,
            "exp": expires_at,
        }
        token = jwt.encode(payload, self.settings.secret_key, algorithm=self.settings.algorithm)
        return token, expires_at

    def decode_token(self, token: str) -> UUID:
        """
        Verify a token and return the user id it was issued for.

        Raises:
            AuthenticationError: Invalid signature, expired or malformed token
        """
        try:
            payload = jwt.decode(
                token,
                self.settings.secret_key,
                algorithms=[self.settings.algorithm],
                options={"require": ["exp", "sub"]},
            )
            return UUID(payload["sub"])
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError("Token expired") from e
        except (jwt.InvalidTokenError, ValueError) as e:
            raise AuthenticationError("Invalid token") from e

    async def authenticate(self, email: str, password: str) -> UserModel:
        """
        Check credentials.

        Raises:
            AuthenticationError: Unknown email, wrong password or inactive user
        """
        user = await user_crud.get_by_email(self.db, email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt", extra={"login_email": email})
            raise AuthenticationError("Invalid email or password")
        if not user.is_active:
            raise AuthenticationError("Account is disabled")
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return user

    async def login(self, email: str, password: str) -> tuple[UserModel, str, datetime]:
        """Authenticate and issue a token: (user, token, expires_at)."""
        user = await self.authenticate(email, password)
        token, expires_at = self.create_token(user)
        return user, token, expires_at

    async def user_from_token(self, token: str) -> UserModel:
        """
        Resolve the active user a token belongs to.

        Raises:
            AuthenticationError: Bad token or user no longer active
        """
        user_id = self.decode_token(token)
        user = await user_crud.get_by_id(self.db, user_id)
        if user is None or not user.is_active:
            raise AuthenticationError("User not found or inactive")
        return user

    def is_internal_admin(self, user: UserModel) -> bool:
        return is_internal_admin(user.email, self.settings)


def issue_draft_token(settings: AuthSettings, ttl_minutes: int = 60) -> str:
    """Sign the value stored in the draft-mode cookie."""
    now = datetime.now(timezone.utc)
    payload = {"draft": True, "iat": now, "exp": now + timedelta(minutes=ttl_minutes)}
    return jwt.encode(payload, settings.effective_preview_secret, algorithm=settings.algorithm)


def verify_draft_token(token: str | None, settings: AuthSettings) -> bool:
    if not token:
        return False
    try:
        payload = jwt.decode(
            token, settings.effective_preview_secret, algorithms=[settings.algorithm]
        )
    except jwt.InvalidTokenError:
        return False
    return payload.get("draft") is True
