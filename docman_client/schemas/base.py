"""Shared model configuration — camelCase on the wire, snake_case in Python."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

NIL_UUID = UUID(int=0)


class DocManModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
