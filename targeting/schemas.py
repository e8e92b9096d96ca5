# targeting/schemas.py
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, model_validator
from simrunner.config import MAX_DELAY_SEC

class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    by: Literal["coords"] = "coords"
    x: float = Field(..., ge=0)
    y: float = Field(..., ge=0)

class ByIdentifier(BaseModel):
    model_config = ConfigDict(frozen=True)

    by: Literal["id"] = "id"
    value: str

class ByLabel(BaseModel):
    model_config = ConfigDict(frozen=True)

    by: Literal["label"] = "label"
    value: str

TargetQuery = Annotated[Union[Coordinates, ByIdentifier, ByLabel], Field(discriminator="by")]

class TapRequest(BaseModel):
    """
    Raw tap parameters as supplied by a caller (HTTP body or CLI flags).
    Explicit coordinates win over --id / --label when both are given.
    """
    model_config = ConfigDict(populate_by_name=True)

    x: Optional[float] = None
    y: Optional[float] = None
    id: Optional[str] = None
    label: Optional[str] = None
    pre_delay: Optional[float] = None
    post_delay: Optional[float] = None

    @model_validator(mode='after')
    def validate_target(self):
        if self.x is not None or self.y is not None:
            if self.x is None or self.y is None:
                raise ValueError("Both x and y must be provided together.")
            if not (self.x >= 0 and self.y >= 0):
                raise ValueError("Coordinates must be non-negative values.")
        else:
            if self.id is None and self.label is None:
                raise ValueError("Either provide both x/y, or use id/label to tap an element.")
            if self.id is not None and self.label is not None:
                raise ValueError("Use only one of id or label.")
            if self.id is not None and not self.id.strip():
                raise ValueError("id must not be empty.")
            if self.label is not None and not self.label.strip():
                raise ValueError("label must not be empty.")

        if self.pre_delay is not None and not (0 <= self.pre_delay <= MAX_DELAY_SEC):
            raise ValueError(f"Pre-delay must be between 0 and {MAX_DELAY_SEC:g} seconds.")
        if self.post_delay is not None and not (0 <= self.post_delay <= MAX_DELAY_SEC):
            raise ValueError(f"Post-delay must be between 0 and {MAX_DELAY_SEC:g} seconds.")
        return self

    def to_query(self) -> TargetQuery:
        if self.x is not None and self.y is not None:
            return Coordinates(x=self.x, y=self.y)
        if self.id is not None:
            return ByIdentifier(value=self.id)
        return ByLabel(value=self.label)
