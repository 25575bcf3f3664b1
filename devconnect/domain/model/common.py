"""Shared configuration of domain models."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity; changes go through ``model_copy(update=...)``.

    Fields may be populated by name or alias, so stored documents using
    ``from``/``to`` load into ``from_date``/``to_date``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)
