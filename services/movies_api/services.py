"""
Business logic service layer
"""
import logging
from typing import Any, List, Optional

from movies_shared import Movie
from movies_shared.exceptions import MovieNotFound, MovieValidationError
from movies_shared.repositories import MovieRepository
from movies_shared.validation import validate_movie, validate_partial_movie

logger = logging.getLogger(__name__)


class MovieService:
    """Movie business logic service"""

    def __init__(self, repository: MovieRepository):
        self.repository = repository

    def list_movies(self, genre: Optional[str] = None) -> List[Movie]:
        """List every movie, or only those of a genre"""
        if genre:
            return self.repository.list_movies_by_genre(genre)
        return self.repository.list_movies()

    def get_movie_by_id(self, movie_id: str) -> Movie:
        """Get movie by ID"""
        movie = self.repository.get_movie_by_id(movie_id)
        if movie is None:
            logger.debug(f"Movie {movie_id} not found")
            raise MovieNotFound(movie_id)
        return movie

    def create_movie(self, payload: Any) -> Movie:
        """Validate and create a new movie"""
        result = validate_movie(payload)
        if not result.success:
            logger.info(f"Rejected movie payload: {len(result.errors)} invalid field(s)")
            raise MovieValidationError(result.errors)

        created_movie = self.repository.create_movie(result.data)
        logger.info(f"Created movie: {created_movie.title} ({created_movie.id})")
        return created_movie

    def update_movie(self, movie_id: str, payload: Any) -> Movie:
        """Validate a partial payload and merge it into an existing movie

        Validation runs before the lookup, so an invalid body for an
        unknown id is a 400 rather than a 404.
        """
        result = validate_partial_movie(payload)
        if not result.success:
            logger.info(f"Rejected update for movie {movie_id}: {len(result.errors)} invalid field(s)")
            raise MovieValidationError(result.errors)

        updated_movie = self.repository.update_movie(movie_id, result.data)
        if updated_movie is None:
            logger.debug(f"Movie {movie_id} not found")
            raise MovieNotFound(movie_id)

        logger.info(f"Updated movie: {updated_movie.title} ({updated_movie.id})")
        return updated_movie

    def delete_movie(self, movie_id: str) -> None:
        """Delete a movie"""
        if not self.repository.delete_movie(movie_id):
            logger.debug(f"Movie {movie_id} not found")
            raise MovieNotFound(movie_id)

        logger.info(f"Deleted movie: {movie_id}")
