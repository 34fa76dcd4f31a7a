"""Pydantic schema for plant categories."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


class CategoryRead(BaseModel):
    """Schema for reading a category.

    ``order`` controls display position; lower numbers appear first.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str
    title: str = ""
    description: Optional[str] = None
    order: Optional[Union[int, float]] = None
    published: Optional[bool] = None

    @field_validator("title", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v
