"""
FastAPI Movies API Service
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, List, Optional

import uvicorn
from fastapi import Body, Depends, FastAPI, Query, Request, Response, status

from movies_shared import HealthCheck, Movie, config
from movies_shared.config import AppConfig
from movies_shared.repositories import MovieRepository
from movies_shared.seed import build_repository

from .cors import add_origin_gate
from .handlers import register_exception_handlers
from .services import MovieService


# Configure logging
logging.basicConfig(
    level=getattr(logging, config.app.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    logger.info(f"🚀 Starting Movies API with {app.state.repository.count()} movies...")

    yield

    logger.info("🛑 Shutting down Movies API...")


def get_movie_service(request: Request) -> MovieService:
    """Dependency injection for movie service"""
    return MovieService(repository=request.app.state.repository)


def create_app(
    app_config: Optional[AppConfig] = None,
    repository: Optional[MovieRepository] = None,
) -> FastAPI:
    """Build the app around a movie repository, seeding one if none is given"""
    app_config = app_config or config.app

    app = FastAPI(
        title="Movies API",
        description="CRUD API over an in-memory movie collection",
        version=app_config.version,
        lifespan=lifespan,
        docs_url="/docs" if app_config.debug else None,
        redoc_url="/redoc" if app_config.debug else None,
    )

    app.state.config = app_config
    app.state.repository = repository if repository is not None else build_repository(app_config.seed_path)

    add_origin_gate(app, app_config.accepted_origins)
    register_exception_handlers(app)

    @app.get("/", response_model=dict)
    async def root():
        """Root endpoint"""
        return {
            "message": "Movies API",
            "version": app_config.version,
            "docs_url": "/docs" if app_config.debug else "Contact admin for API documentation",
        }

    @app.get("/health", response_model=HealthCheck)
    async def health_check(request: Request):
        """Health check endpoint"""
        return HealthCheck(
            status="healthy",
            timestamp=datetime.now(timezone.utc),
            version=app_config.version,
            services={"store": f"{request.app.state.repository.count()} movies"},
        )

    @app.get("/movies", response_model=List[Movie])
    async def list_movies(
        genre: Optional[str] = Query(None, description="Filter by genre, ignoring case"),
        movie_service: MovieService = Depends(get_movie_service),
    ):
        """List all movies, or only those having the given genre"""
        return movie_service.list_movies(genre)

    @app.get("/movies/{movie_id}", response_model=Movie)
    async def get_movie(movie_id: str, movie_service: MovieService = Depends(get_movie_service)):
        """Get a specific movie by ID"""
        return movie_service.get_movie_by_id(movie_id)

    @app.post("/movies", response_model=Movie, status_code=status.HTTP_201_CREATED)
    async def create_movie(
        payload: Any = Body(...),
        movie_service: MovieService = Depends(get_movie_service),
    ):
        """Create a movie, the id is generated by the service"""
        return movie_service.create_movie(payload)

    @app.patch("/movies/{movie_id}", response_model=Movie)
    async def update_movie(
        movie_id: str,
        payload: Any = Body(...),
        movie_service: MovieService = Depends(get_movie_service),
    ):
        """Update some fields of a movie"""
        return movie_service.update_movie(movie_id, payload)

    @app.delete("/movies/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_movie(movie_id: str, movie_service: MovieService = Depends(get_movie_service)):
        """Delete a movie"""
        movie_service.delete_movie(movie_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.options("/movies/{movie_id}")
    async def movie_options(movie_id: str):
        """Preflight, CORS headers are added by the origin gate"""
        return Response(status_code=status.HTTP_200_OK)

    return app


def run():
    """Console entry point"""
    logger.info(f"Server listening on http://localhost:{config.app.port}")
    uvicorn.run(
        "movies_api.main:app",
        host=config.app.host,
        port=config.app.port,
        log_level=config.app.log_level.lower(),
        reload=config.app.debug,
    )


app = create_app()


if __name__ == "__main__":
    run()
