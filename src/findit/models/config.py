"""
Configuration data models for findit.

This module defines the immutable search configuration produced by the
command-line parser and consumed by the walker, searcher and reporter.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SearchConfig(BaseModel):
    """
    Validated configuration for a single search run.

    Instances are frozen: every field is fixed once the parser has built the
    configuration.

    Attributes:
        query: Substring to search for (lowercased when ignore_case is set)
        root_dir: Directory the walk starts from
        extension: Extension filter without the leading dot, empty for none
        ignore_case: Whether matching is case-insensitive
        invert_match: Whether to list files without any match instead of lines
        debug: Whether to trace traversal on standard output
    """

    model_config = ConfigDict(frozen=True)

    query: str = Field(..., min_length=1, description="Substring to search for")
    root_dir: str = Field(".", min_length=1, description="Directory the walk starts from")
    extension: str = Field("", description="Extension filter, empty for no filter")
    ignore_case: bool = Field(False, strict=True, description="Case-insensitive matching")
    invert_match: bool = Field(False, description="List files without any match")
    debug: bool = Field(False, description="Trace traversal on standard output")

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """The query is matched verbatim, so only emptiness is rejected."""
        if not v:
            raise ValueError("Search query cannot be empty")
        return v

    @model_validator(mode='before')
    @classmethod
    def normalize_query(cls, data: Any) -> Any:
        """Fold the query to lowercase for case-insensitive searches."""
        if isinstance(data, dict) and data.get('ignore_case') is True and isinstance(data.get('query'), str):
            data = {**data, 'query': data['query'].lower()}
        return data

    def has_extension_filter(self) -> bool:
        """Check if an explicit extension filter is configured."""
        return self.extension != ""

    def summarize(self) -> str:
        """One-line description of the search, printed with the final summary."""
        summary = f"---- search for '{self.query}'"
        if self.ignore_case:
            summary += ", nocase"
        if self.has_extension_filter():
            summary += f", ext: {self.extension}"
        summary += " ----------------------------"
        return summary

    def __str__(self) -> str:
        return f"rootdir: {self.root_dir}, query: {self.query}"
