"""
Search engine discovery endpoints.

Routes: GET /sitemap.xml, GET /robots.txt

Dependencies: franchise_site.application.services.seo_service
System role: SEO HTTP surface
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from franchise_site.api.deps.dependencies import get_seo_service
from franchise_site.application.services.seo_service import SITEMAP_CACHE_CONTROL, SeoService

router = APIRouter(tags=["seo"])


@router.get("/sitemap.xml", include_in_schema=False)
async def sitemap(seo_service: SeoService = Depends(get_seo_service)) -> Response:
    return Response(
        content=await seo_service.sitemap_xml(),
        media_type="application/xml",
        headers={"Cache-Control": SITEMAP_CACHE_CONTROL},
    )


@router.get("/robots.txt", include_in_schema=False, response_class=PlainTextResponse)
async def robots(seo_service: SeoService = Depends(get_seo_service)) -> str:
    return seo_service.robots_txt()
