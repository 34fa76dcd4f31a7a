"""
Pydantic schema for offers.

Offers are promotions published by a nursery (or site-wide when no
``nurseryName`` is set).  Field names follow the stored documents, so
``nurseryName`` and ``endDate`` are exposed through aliases.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OfferRead(BaseModel):
    """Schema for reading an offer."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)

    id: str
    title: str = ""
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    nursery_name: Optional[str] = Field(None, alias="nurseryName")
    end_date: Optional[Any] = Field(None, alias="endDate")
    published: Optional[bool] = None

    @field_validator("title", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def drop_null_tags(cls, v):
        if isinstance(v, list):
            return [tag for tag in v if tag is not None]
        return v
