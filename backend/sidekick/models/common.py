"""Common base types shared across all models."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys on the wire.

    Accepts either snake_case or camelCase on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
