"""
Shared pydantic base model.

Python code uses snake_case field names; JSON bodies use camelCase, matching
the field names the catalog frontend sends. Both spellings are accepted on
input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
