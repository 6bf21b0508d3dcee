"""
Vault models for walkpwd.
"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Entry(BaseModel):
    """A named secret. The name is the unique, case-sensitive key."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    password: str


# Adapter for the whole on-disk collection
EntryList = TypeAdapter(list[Entry])
