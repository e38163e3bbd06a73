"""Base DTO class."""

from pydantic import BaseModel, ConfigDict


class DTO(BaseModel):
    """Base class for application DTOs (immutable once built)."""

    model_config = ConfigDict(frozen=True)


class PartialDTO(BaseModel):
    """Base class for patch-style DTOs where only set fields are applied."""

    model_config = ConfigDict(frozen=True, extra="forbid")
