"""Shared configuration of value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable, compared field by field."""

    model_config = ConfigDict(frozen=True)
