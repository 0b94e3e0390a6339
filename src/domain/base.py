from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns' storage"""
    return datetime.now(UTC).replace(tzinfo=None)


class CamelModel(BaseModel):
    """Schema exposed on the wire with camelCase field names"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
