"""
Dependency injection container.

Factory functions for FastAPI dependencies: cached integration clients,
per-request services, the authenticated user and request metadata.

Dependencies: franchise_site.configs, franchise_site.application, franchise_site.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends, HTTPException, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.application.services import (
    AgentService,
    AuditService,
    AuthService,
    ContactSubmissionService,
    FranchiseService,
    ImportService,
    LeadService,
    MediaService,
    PageService,
    PublicSiteService,
    RequestMeta,
    SeoService,
    SiteSettingsService,
    TaxonomyService,
    UserService,
)
from franchise_site.application.services.auth_service import verify_draft_token
from franchise_site.boundary.db import get_async_db
from franchise_site.boundary.db.models.user_model import UserModel
from franchise_site.configs import Settings, get_settings
from franchise_site.core.exceptions import AuthenticationError
from franchise_site.models.catalog import FilterState, SortOption


class ServiceCache:
    """Container for cached integration clients and renderers."""

    def __init__(self):
        self._s3_client = None
        self._mailer = None
        self._verifier = None
        self._webhooks = None
        self._email_renderer = None
        self._page_renderer = None

    @property
    def s3_client(self):
        """Get cached S3 media client (None when no bucket is configured)."""
        if self._s3_client is None:
            storage = get_settings().storage
            if not storage.bucket:
                return None
            from franchise_site.boundary.aws.s3_client import S3MediaClient

            self._s3_client = S3MediaClient(
                bucket=storage.bucket,
                region=storage.region,
                endpoint_url=storage.endpoint_url,
                public_base_url=storage.public_base_url,
            )
        return self._s3_client

    @property
    def mailer(self):
        """Get cached Resend client."""
        if self._mailer is None:
            from franchise_site.boundary.mailer import ResendEmailClient

            email = get_settings().email
            self._mailer = ResendEmailClient(
                api_key=email.api_key,
                from_email=email.from_email,
                api_url=email.api_url,
                timeout=email.timeout_seconds,
            )
        return self._mailer

    @property
    def verifier(self):
        """Get cached Turnstile verifier."""
        if self._verifier is None:
            from franchise_site.boundary.captcha import TurnstileVerifier

            captcha = get_settings().captcha
            self._verifier = TurnstileVerifier(
                secret_key=captcha.secret_key,
                verify_url=captcha.verify_url,
            )
        return self._verifier

    @property
    def webhooks(self):
        """Get cached agent webhook client."""
        if self._webhooks is None:
            from franchise_site.boundary.webhooks import GHLWebhookClient

            self._webhooks = GHLWebhookClient(timeout=get_settings().webhooks.timeout_seconds)
        return self._webhooks

    @property
    def email_renderer(self):
        if self._email_renderer is None:
            from franchise_site.rendering import EmailRenderer

            self._email_renderer = EmailRenderer(get_settings().site)
        return self._email_renderer

    @property
    def page_renderer(self):
        if self._page_renderer is None:
            from franchise_site.rendering import PageRenderer

            self._page_renderer = PageRenderer(get_settings().site)
        return self._page_renderer

    def clear(self) -> None:
        """Clear all cached instances."""
        self._s3_client = None
        self._mailer = None
        self._verifier = None
        self._webhooks = None
        self._email_renderer = None
        self._page_renderer = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def client_ip(request: Request) -> str | None:
    """
    Resolve the requester IP behind proxies.

    Order: first X-Forwarded-For entry, X-Real-IP, then the socket peer.
    """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()
    return request.client.host if request.client else None


def extract_token(request: Request, settings: Settings) -> str | None:
    """Admin token from the Authorization header or the auth cookie."""
    header = request.headers.get("authorization", "")
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get(settings.auth.cookie_name) or None


def get_auth_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> AuthService:
    return AuthService(db=db, settings=settings.auth)


async def get_optional_user(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings_dependency),
) -> UserModel | None:
    """Authenticated user when a valid token is present, otherwise None."""
    token = extract_token(request, settings)
    if not token:
        return None
    try:
        return await auth_service.user_from_token(token)
    except AuthenticationError:
        return None


async def get_current_user(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings_dependency),
) -> UserModel:
    """
    Require an authenticated admin user.

    Raises:
        HTTPException(401): Missing, invalid or expired token
    """
    token = extract_token(request, settings)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return await auth_service.user_from_token(token)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


def get_request_meta(
    request: Request,
    user: UserModel | None = Depends(get_optional_user),
) -> RequestMeta:
    return RequestMeta(
        user_id=user.id if user is not None else None,
        ip_address=client_ip(request),
        user_agent=request.headers.get("user-agent"),
    )


def get_audit_service(
    db: AsyncSession = Depends(get_async_db),
    meta: RequestMeta = Depends(get_request_meta),
) -> AuditService:
    """
    Get audit service bound to the acting user and request origin.

    Args:
        db: Async database session (injected via Depends)
        meta: Acting user, IP and user agent

    Returns:
        AuditService: Audit recorder for this request
    """
    return AuditService(db=db, meta=meta)


def is_draft_mode(
    request: Request,
    settings: Settings = Depends(get_settings_dependency),
) -> bool:
    """Whether the request carries a valid preview cookie."""
    return verify_draft_token(request.cookies.get(settings.auth.draft_cookie_name), settings.auth)


def get_filter_state(
    search: str = "",
    category: list[str] | None = Query(None),
    max_cash: str | None = None,
    sort_by: SortOption = SortOption.RELEVANCE,
    featured: bool = False,
    sponsored: bool = False,
    top_pick: bool = False,
) -> FilterState:
    """Catalog filter state from the query string."""
    return FilterState(
        search=search,
        categories=category or [],
        max_cash=max_cash,
        sort_by=sort_by,
        only_featured=featured,
        only_sponsored=sponsored,
        only_top_pick=top_pick,
    )


def get_media_service(
    db: AsyncSession = Depends(get_async_db),
    audit: AuditService = Depends(get_audit_service),
    settings: Settings = Depends(get_settings_dependency),
) -> MediaService:
    return MediaService(
        db=db,
        storage=get_service_cache().s3_client,
        settings=settings.storage,
        audit=audit,
    )


def get_franchise_service(
    db: AsyncSession = Depends(get_async_db),
    audit: AuditService = Depends(get_audit_service),
) -> FranchiseService:
    """
    Get franchise service instance.

    Args:
        db: Async database session (injected via Depends)
        audit: Audit recorder for the request

    Returns:
        FranchiseService: Franchise service with media URL resolution
    """
    return FranchiseService(db=db, storage=get_service_cache().s3_client, audit=audit)


def get_agent_service(
    db: AsyncSession = Depends(get_async_db),
    audit: AuditService = Depends(get_audit_service),
) -> AgentService:
    return AgentService(db=db, audit=audit)


def get_taxonomy_service(
    db: AsyncSession = Depends(get_async_db),
    audit: AuditService = Depends(get_audit_service),
) -> TaxonomyService:
    return TaxonomyService(db=db, audit=audit)


def get_page_service(
    db: AsyncSession = Depends(get_async_db),
    audit: AuditService = Depends(get_audit_service),
) -> PageService:
    return PageService(db=db, audit=audit)


def get_site_settings_service(
    db: AsyncSession = Depends(get_async_db),
    audit: AuditService = Depends(get_audit_service),
) -> SiteSettingsService:
    return SiteSettingsService(db=db, audit=audit)


def get_user_service(
    db: AsyncSession = Depends(get_async_db),
    audit: AuditService = Depends(get_audit_service),
    settings: Settings = Depends(get_settings_dependency),
) -> UserService:
    return UserService(db=db, settings=settings.auth, audit=audit)


def get_import_service(
    db: AsyncSession = Depends(get_async_db),
    audit: AuditService = Depends(get_audit_service),
) -> ImportService:
    return ImportService(db=db, audit=audit)


def get_contact_submission_service(
    db: AsyncSession = Depends(get_async_db),
) -> ContactSubmissionService:
    return ContactSubmissionService(db=db)


def get_lead_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> LeadService:
    """
    Get lead service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Email and webhook configuration

    Returns:
        LeadService: Lead intake wired to the cached email, captcha and webhook clients
    """
    cache = get_service_cache()
    return LeadService(
        db=db,
        mailer=cache.mailer,
        verifier=cache.verifier,
        webhooks=cache.webhooks,
        renderer=cache.email_renderer,
        main_contact_email=settings.email.main_contact_email,
        webhooks_enabled=settings.webhooks.enabled,
    )


def get_seo_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> SeoService:
    return SeoService(db=db, base_url=settings.site.root_url)


def get_public_site_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> PublicSiteService:
    cache = get_service_cache()
    return PublicSiteService(
        db=db,
        renderer=cache.page_renderer,
        storage=cache.s3_client,
        captcha_site_key=settings.captcha.site_key,
    )
