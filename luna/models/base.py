"""Shared Pydantic base models and utilities."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LunaBase(BaseModel):
    """Base model with shared config for all Luna schemas.

    Derived cycle values are immutable and serialise with camelCase keys
    (``phaseName``, ``daysSinceOvulation``) for the dashboard.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_json_dict(self) -> dict:
        """Dump to a JSON-compatible dict using the camelCase aliases."""
        return self.model_dump(by_alias=True, mode="json")
