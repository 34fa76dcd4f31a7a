"""
Pydantic schema for nursery records.

A nursery lists the plant categories it carries and the services it
offers (delivery, landscaping, consultations).  ``featured`` nurseries
get a dedicated section on the home page.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NurseryRead(BaseModel):
    """Schema for reading a nursery."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str
    name: str = ""
    location: str = ""
    categories: List[str] = Field(default_factory=list)
    services: List[str] = Field(default_factory=list)
    featured: bool = False
    published: Optional[bool] = None

    @field_validator("name", "location", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v

    @field_validator("categories", "services", mode="before")
    @classmethod
    def none_as_empty_list(cls, v):
        if v is None:
            return []
        if isinstance(v, list):
            return [item for item in v if item is not None]
        return v
