import enum
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, field_validator, model_validator

from ascii_studio.errors import MalformedResponse

DEFAULT_FONT = "standard"
DEFAULT_TEXT = "Hello World"
DEFAULT_PREVIEW_TEXT = "Hello"

DEFAULT_WIDTH = 80
MIN_WIDTH = 40
MAX_WIDTH = 200
WIDTH_STEP = 5

JUSTIFY_CHOICES = ("left", "center", "right")
DEFAULT_JUSTIFY = "center"


class Phase(enum.Enum):
    """Request lifecycle of a controller: idle -> pending -> settled."""
    IDLE = "idle"
    PENDING = "pending"
    SETTLED = "settled"


@dataclass(frozen=True)
class Notice:
    """User-facing message; destructive notices report failures."""
    title: str
    description: str
    variant: str = "default"


class FontCatalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    fonts: Tuple[StrictStr, ...] = Field(..., description="Font names in catalog order")
    count: StrictInt = Field(..., description="Number of fonts reported by the backend")

    @model_validator(mode="before")
    @classmethod
    def _default_count(cls, data):
        if isinstance(data, dict) and data.get("count") is None and isinstance(data.get("fonts"), list):
            data = {**data, "count": len(data["fonts"])}
        return data

    @classmethod
    def from_payload(cls, payload: Any) -> "FontCatalog":
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise MalformedResponse(f"unexpected font list response: {e}") from e


class GenerationRequest(BaseModel):
    """
    A single render request.

    ``font`` left as None asks the backend to pick one at random. Emptiness
    of ``text`` is checked by callers before a request is built.
    """
    model_config = ConfigDict(frozen=True)

    text: str
    font: Optional[str] = None
    width: int = DEFAULT_WIDTH
    justify: str = DEFAULT_JUSTIFY

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class GenerationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    ascii_art: StrictStr
    # The backend must echo its font choice, even for random requests
    font_used: StrictStr = Field(..., min_length=1)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("metadata", mode="before")
    @classmethod
    def _null_metadata(cls, value):
        return {} if value is None else value

    @classmethod
    def from_payload(cls, payload: Any) -> "GenerationResult":
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise MalformedResponse(f"unexpected generation response: {e}") from e
