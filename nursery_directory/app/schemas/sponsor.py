"""Pydantic schema for sponsors.  Display fields are kept as extras."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class SponsorRead(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str
    published: Optional[bool] = None
