from typing import Any, Dict, List

__all__ = [
    "MovieError",
    "MovieNotFound",
    "MovieValidationError",
]


class MovieError(Exception):
    """Base class for all movie-related exceptions."""

    status_code: int = 500
    detail: Any = "Internal server error"

    def __init__(self, detail: Any = None):
        if detail is not None:
            self.detail = detail
        super().__init__(str(self.detail))


class MovieNotFound(MovieError):
    """Raised when a movie id is not in the store."""

    status_code = 404
    detail = "Movie not found"

    def __init__(self, movie_id: str):
        super().__init__()
        self.movie_id = movie_id


class MovieValidationError(MovieError):
    """Raised when a payload fails the movie schema."""

    status_code = 400

    def __init__(self, errors: List[Dict[str, Any]]):
        super().__init__(errors)
        self.errors = errors
