"""vodlist Backend - 视频源分类列表聚合服务入口。"""

from fastapi import FastAPI
from fastapi.concurrency import asynccontextmanager
from fastapi.routing import APIRoute
from loguru import logger
from starlette.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.domain.exceptions import DomainException
from src.core.infrastructure.logging import setup_logging
from src.core.infrastructure.redis import redis_client
from src.core.interfaces.http.exceptions import (
    domain_exception_handler,
    global_exception_handler,
)
from src.core.interfaces.http.routers import api_router
from src.modules.listings.application import dependencies as listings_app_deps
from src.modules.listings.infrastructure import dependencies as listings_infra_deps
from src.modules.sources.application import dependencies as sources_app_deps
from src.modules.sources.infrastructure import dependencies as sources_infra_deps


def custom_generate_unique_id(route: APIRoute) -> str:
    """Generate unique operation IDs for OpenAPI."""
    if route.tags:
        return f"{route.tags[0]}-{route.name}"
    return route.name


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Application lifespan manager."""
    setup_logging()
    logger.info("Starting vodlist backend...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    if settings.PROXY_ENDPOINT:
        logger.info(f"Upstream requests go through proxy {settings.PROXY_ENDPOINT}")

    yield

    logger.info("Shutting down vodlist backend...")
    await redis_client.close()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description=(
        "视频源分类列表聚合服务 - 从第三方采集接口（JSON / XML）抓取分类视频列表，"
        "统一为一种记录结构\n\n"
        "## 用户标识\n\n"
        f"所有业务接口都需要在 {settings.USER_ID_HEADER} 请求头中携带用户 ID。"
    ),
    version="0.1.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    docs_url=f"{settings.API_V1_STR}/docs",
    redoc_url=f"{settings.API_V1_STR}/redoc",
    root_path=settings.ROOTPATH,
    generate_unique_id_function=custom_generate_unique_id,
    lifespan=lifespan,
)

# Dependency overrides (application -> infrastructure)
app.dependency_overrides[sources_app_deps.get_source_registry] = (
    sources_infra_deps.get_source_registry
)

app.dependency_overrides[listings_app_deps.get_proxy_fetcher] = (
    listings_infra_deps.get_proxy_fetcher
)
app.dependency_overrides[listings_app_deps.get_category_page_store] = (
    listings_infra_deps.get_category_page_store
)

# Exception handlers
app.add_exception_handler(DomainException, domain_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# CORS middleware
if settings.all_cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.all_cors_origins,
        allow_credentials=True,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

# Include API router
app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint.

    Redis 只保存用户视频源和分类页码，不可用时服务降级运行。
    """
    redis_health_result = await redis_client.health_check()
    overall_status = (
        "healthy" if redis_health_result.status.value == "ok" else "degraded"
    )

    return {
        "status": overall_status,
        "environment": settings.ENVIRONMENT,
        "version": "0.1.0",
        "components": {
            "redis": redis_health_result.to_dict(),
        },
        "proxy_enabled": bool(settings.PROXY_ENDPOINT),
    }


@app.get("/", tags=["root"])
async def root():
    """Root endpoint."""
    return {
        "message": "Welcome to vodlist API",
        "docs": f"{settings.API_V1_STR}/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.SERVER_PORT,
        reload=settings.ENVIRONMENT == "local",
    )
