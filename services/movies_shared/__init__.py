"""
Shared modules for the movies API service
"""
from .models import Genre, Movie, MovieCreate, MovieUpdate, HealthCheck
from .config import config

__all__ = ["Genre", "Movie", "MovieCreate", "MovieUpdate", "HealthCheck", "config"]
