"""
Seed data loader - reads the bundled movie file and validates each record
"""
import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from .models import Movie
from .repositories import MovieRepository

logger = logging.getLogger(__name__)


def load_seed_movies(path: Union[str, Path]) -> List[Movie]:
    """Read a JSON array of movies, skipping records that fail validation"""
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        try:
            records = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in seed file {path}: {e}") from e

    if not isinstance(records, list):
        raise ValueError(f"Seed file {path} must contain a JSON array")

    movies = []
    for position, record in enumerate(records):
        try:
            movies.append(Movie.model_validate(record))
        except ValidationError as e:
            logger.warning(f"Skipping seed record {position} in {path}: {str(e)}")

    return movies


def build_repository(path: Union[str, Path]) -> MovieRepository:
    """Create a repository holding the seed movies"""
    repository = MovieRepository()
    for movie in load_seed_movies(path):
        try:
            repository.add_movie(movie)
        except ValueError as e:
            logger.warning(f"Skipping seed movie '{movie.title}': {str(e)}")

    logger.info(f"Loaded {repository.count()} movies from {path}")
    return repository
