"""Parse report model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ParseReport(BaseModel):
    """Summary of one parse run."""

    summary: str
    compounds_tree: str
    parsed_files: int = Field(..., ge=0)
    compounds_by_kind: dict[str, int] = Field(default_factory=dict)
    images: list[str] = Field(default_factory=list)
