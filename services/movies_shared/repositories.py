"""
In-memory movie repository
"""
import logging
import threading
import uuid
from typing import Any, Dict, Iterable, List, Optional

from .models import Movie

logger = logging.getLogger(__name__)


class MovieRepository:
    """Ordered in-memory movie collection

    Records keep insertion order; removals never reorder the remaining ones.
    Each read-modify-write runs under a single lock.
    """

    def __init__(self, movies: Optional[Iterable[Movie]] = None):
        self._movies: List[Movie] = []
        self._lock = threading.RLock()
        for movie in movies or []:
            self.add_movie(movie)

    def count(self) -> int:
        return len(self._movies)

    def add_movie(self, movie: Movie) -> Movie:
        """Add a movie that already carries an id"""
        with self._lock:
            if self._find_index(movie.id) is not None:
                raise ValueError(f"Duplicate movie id: {movie.id}")
            self._movies.append(movie)
            return movie

    def list_movies(self) -> List[Movie]:
        """Get all movies in store order"""
        with self._lock:
            return list(self._movies)

    def list_movies_by_genre(self, genre: str) -> List[Movie]:
        """Get movies having the genre, ignoring case"""
        wanted = genre.lower()
        with self._lock:
            return [
                movie for movie in self._movies
                if any(g.lower() == wanted for g in movie.genre)
            ]

    def get_movie_by_id(self, movie_id: str) -> Optional[Movie]:
        """Get movie by ID"""
        with self._lock:
            index = self._find_index(movie_id)
            return self._movies[index] if index is not None else None

    def create_movie(self, fields: Dict[str, Any]) -> Movie:
        """Create a new movie from validated fields"""
        with self._lock:
            movie_id = str(uuid.uuid4())
            while self._find_index(movie_id) is not None:
                movie_id = str(uuid.uuid4())

            movie = Movie(id=movie_id, **fields)
            self._movies.append(movie)
            return movie

    def update_movie(self, movie_id: str, changes: Dict[str, Any]) -> Optional[Movie]:
        """Merge validated changes over an existing movie"""
        changes = {key: value for key, value in changes.items() if key != "id"}
        with self._lock:
            index = self._find_index(movie_id)
            if index is None:
                return None

            updated = self._movies[index].model_copy(update=changes)
            self._movies[index] = updated
            return updated

    def delete_movie(self, movie_id: str) -> bool:
        """Delete a movie"""
        with self._lock:
            index = self._find_index(movie_id)
            if index is None:
                return False

            del self._movies[index]
            return True

    def _find_index(self, movie_id: str) -> Optional[int]:
        for index, movie in enumerate(self._movies):
            if movie.id == movie_id:
                return index
        return None
