"""Pydantic schema for home page search results."""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict


ResultType = Literal["nursery", "offer", "category"]


class SearchResult(BaseModel):
    """One row of the search results list.

    ``link`` is the front-end route the row navigates to and ``tags``
    holds at most two labels shown under the title.
    """

    model_config = ConfigDict(frozen=True)

    type: ResultType
    id: str
    title: str
    subtitle: str
    link: str
    tags: List[str]
