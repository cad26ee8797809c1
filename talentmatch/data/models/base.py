"""
Base model classes for talentmatch data models.

Provides common configuration shared across all value models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class EmbeddedModel(BaseModel):
    """
    Base model for plain value structures handed to and returned by the engine.

    Models are frozen: they are built once from caller data and never
    mutated afterwards. Unknown keys on incoming records are ignored so that
    whole marketplace documents can be passed in.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        frozen=True,
        extra="ignore",
    )


def none_to_list(value: Any) -> Any:
    """Treat a missing list field as an empty one."""
    if value is None:
        return []
    return value
