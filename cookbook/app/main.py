# cookbook/app/main.py
from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from supabase import Client, create_client

from cookbook import __version__
from cookbook.app.config import Settings, get_settings
from cookbook.app.domain.errors import AuthError, NotFoundError, StoreError, ValidationError
from cookbook.app.infra.auth.tokens import TokenService
from cookbook.app.infra.db.base import RecipeRepository, StoryRepository
from cookbook.app.infra.db.migrations import apply_migrations
from cookbook.app.infra.db.seed import seed_sample_content
from cookbook.app.infra.db.supabase_content_repo import (
    SupabaseRecipeRepository,
    SupabaseStoryRepository,
)
from cookbook.app.routers.admin import router as admin_router
from cookbook.app.routers.auth import router as auth_router
from cookbook.app.routers.recipes import router as recipes_router
from cookbook.app.routers.stories import router as stories_router
from cookbook.app.services.content_service import RecipeService, StoryService

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    # stdout only; containers collect it
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("Starting Family Cookbook API (env=%s)", settings.APP_ENV)

    if settings.RUN_MIGRATIONS and app.state.supabase is not None:
        apply_migrations(app.state.supabase)
    if settings.SEED_SAMPLE_CONTENT:
        seed_sample_content(app.state.recipe_repository)

    logger.info("Application startup complete")
    yield
    logger.info("Shutting down Family Cookbook API")


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Validation error on %s %s: %s", request.method, request.url.path, exc.errors)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"errors": exc.errors},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
            message = error.get("msg", "Invalid value")
            errors.append(f"{location}: {message}" if location else message)
        logger.warning("Malformed request on %s %s: %s", request.method, request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"errors": errors or ["Invalid request."]},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": str(exc)},
        )

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError):
        logger.warning("Unauthorized request on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": str(exc)},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Something went wrong. Please try again."},
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception: %s", exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Something went wrong. Please try again."},
        )


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[Client] = None,
    recipe_repository: Optional[RecipeRepository] = None,
    story_repository: Optional[StoryRepository] = None,
) -> FastAPI:
    """
    Build the API with its collaborators.

    Args:
        settings: Application settings (defaults to the environment)
        client: Supabase client; created from settings when repositories are not given
        recipe_repository: Overrides the Supabase recipe repository
        story_repository: Overrides the Supabase story repository
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    if client is None and (recipe_repository is None or story_repository is None):
        client = create_client(str(settings.SUPABASE_URL), settings.SUPABASE_SERVICE_ROLE_KEY)

    recipe_repository = recipe_repository or SupabaseRecipeRepository(client)
    story_repository = story_repository or SupabaseStoryRepository(client)

    app = FastAPI(title="Family Cookbook API", version=__version__, lifespan=lifespan)

    app.state.settings = settings
    app.state.supabase = client
    app.state.recipe_repository = recipe_repository
    app.state.story_repository = story_repository
    app.state.recipe_service = RecipeService(recipe_repository)
    app.state.story_service = StoryService(story_repository)
    app.state.token_service = TokenService(
        secret_key=settings.AUTH_SECRET_KEY,
        admin_username=settings.ADMIN_USERNAME,
        admin_password=settings.ADMIN_PASSWORD,
        ttl_minutes=settings.AUTH_TOKEN_TTL_MINUTES,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.FRONTEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router)
    app.include_router(recipes_router)
    app.include_router(stories_router)
    app.include_router(admin_router)
    _register_exception_handlers(app)

    @app.get("/api/health")
    def health():
        return {"ok": True}

    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "cookbook.app.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.APP_ENV == "local",
    )


if __name__ == "__main__":
    run()
