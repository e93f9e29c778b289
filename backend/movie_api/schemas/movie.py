"""Movie Schemas: request validation and response shapes for /movies.

Invariants:
    - MovieBody: title non-empty string, rating number in [0, 10], isScary boolean
    - MovieBody rejects unknown fields and does not coerce types ("7.5", "true", 1)
    - Integers are accepted as ratings; NaN and infinity are not
    - API field is isScary; Python attribute is is_scary

Design Decisions:
    - Strict field types so the body shape matches the JSON types clients must send
    - Same body for POST and PUT: updates are full replacements, no optional fields
"""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictStr


class MovieBody(BaseModel):
    """Create/update payload. All fields required."""
    model_config = ConfigDict(extra="forbid")

    title: StrictStr = Field(min_length=1)
    rating: StrictFloat = Field(ge=0, le=10, allow_inf_nan=False)
    is_scary: StrictBool = Field(alias="isScary")


class MovieResponse(BaseModel):
    """Movie as returned by the API."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    rating: float
    is_scary: bool = Field(alias="isScary")


class ErrorResponse(BaseModel):
    """Body of a 404 response."""
    error: str
