# src/mockgen/models/batch.py
"""Batch model produced by the planner."""

from pydantic import BaseModel, Field


class Batch(BaseModel):
    """One upstream request for `count` questions over `topics`."""

    topics: list[str] = Field(min_length=1)
    count: int = Field(ge=1)

    @property
    def primary_topic(self) -> str:
        return self.topics[0]
