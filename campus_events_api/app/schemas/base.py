"""
Shared base model for API payloads.

The browser client speaks camelCase JSON.  ``CamelModel`` generates
camelCase aliases for every field while still accepting snake_case
names when models are built in Python.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }
