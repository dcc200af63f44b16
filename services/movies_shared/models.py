"""
Shared data models for the movies API

Field constraints are declared once as annotated types and shared by the
full (create) and partial (update) models.
"""
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainValidator,
    TypeAdapter,
    ValidationError,
    field_validator,
)

MIN_YEAR = 1888
MAX_YEAR = 2024
DEFAULT_RATE = 5


class Genre(str, Enum):
    """Movie genres enum"""
    ACTION = "Action"
    COMEDY = "Comedy"
    DRAMA = "Drama"
    HORROR = "Horror"
    CRIME = "Crime"
    ROMANCE = "Romance"
    SCI_FI = "Sci-Fi"


_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    """Reject anything that does not parse as an absolute URL, keep the original text"""
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("Invalid url") from None
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_whole_number(value: Any) -> Any:
    """Accept ints and integral floats such as 1979.0, nothing else"""
    if not _is_number(value):
        raise ValueError(f"Expected integer, received {type(value).__name__}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError("Expected integer, received float")
        return int(value)
    return value


def _check_rate(value: Any) -> Union[int, float]:
    """Keep the number as sent so an integer rate stays an integer"""
    if not _is_number(value):
        raise ValueError(f"Expected number, received {type(value).__name__}")
    if value < 0:
        raise ValueError("Number must be greater than or equal to 0")
    if value > 10:
        raise ValueError("Number must be less than or equal to 10")
    return value


Title = Annotated[str, Field(strict=True, min_length=1)]
Year = Annotated[int, Field(ge=MIN_YEAR, le=MAX_YEAR), BeforeValidator(_check_whole_number)]
Director = Annotated[str, Field(strict=True)]
Duration = Annotated[int, Field(gt=0), BeforeValidator(_check_whole_number)]
Rate = Annotated[Union[int, float], PlainValidator(_check_rate)]
Poster = Annotated[str, Field(strict=True), AfterValidator(_check_url)]
Genres = List[Genre]


class MovieCreate(BaseModel):
    """Full movie payload, every field but rate is required"""
    title: Title
    year: Year
    director: Director
    duration: Duration
    rate: Rate = DEFAULT_RATE
    poster: Poster
    genre: Genres

    model_config = ConfigDict(use_enum_values=True)


class MovieUpdate(BaseModel):
    """Partial movie payload, only fields that are present get validated"""
    title: Optional[Title] = None
    year: Optional[Year] = None
    director: Optional[Director] = None
    duration: Optional[Duration] = None
    rate: Optional[Rate] = None
    poster: Optional[Poster] = None
    genre: Optional[Genres] = None

    model_config = ConfigDict(use_enum_values=True)

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value):
        """Absent means unchanged, an explicit null is never a valid value"""
        if value is None:
            raise ValueError("Expected a value, received null")
        return value


class Movie(MovieCreate):
    """Movie data model"""
    id: str = Field(..., min_length=1, max_length=100)


class HealthCheck(BaseModel):
    """Health check response"""
    status: str
    timestamp: datetime
    version: str
    services: Dict[str, str]
