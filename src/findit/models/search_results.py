"""
Search results data models for findit.

This module defines the per-file search result, the matched line it carries,
and the counters accumulated while walking a directory tree.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, model_validator


class LineMatch(BaseModel):
    """
    A single line that contains the query.

    Attributes:
        line_number: Physical line number in the file (1-based)
        content: Line text without its line terminator
    """

    line_number: int = Field(..., ge=1, description="Physical line number (1-based)")
    content: str = Field(..., description="Line text without its terminator")


class FileSearchResult(BaseModel):
    """
    Outcome of searching one file.

    Produced fresh for every file that passes the extension classifier and
    never persisted.

    Attributes:
        path: Absolute path of the searched file
        matches: Matching lines in file order
        lines_scanned: Number of physical lines examined
        skipped: Whether the file could not be read as text
        error: Reason the file was skipped, if it was
    """

    path: str = Field(..., min_length=1, description="Absolute path of the searched file")
    matches: List[LineMatch] = Field(default_factory=list, description="Matching lines")
    lines_scanned: int = Field(0, ge=0, description="Number of physical lines examined")
    skipped: bool = Field(False, description="Whether the file could not be read as text")
    error: Optional[str] = Field(None, description="Reason the file was skipped")

    @model_validator(mode='after')
    def validate_result(self):
        """A skipped file carries no matches."""
        if self.skipped and self.matches:
            raise ValueError("Skipped file cannot have matches")
        return self

    def has_matches(self) -> bool:
        """Check if any line matched."""
        return len(self.matches) > 0

    def get_match_count(self) -> int:
        """Get the number of matching lines."""
        return len(self.matches)

    def display_path(self) -> str:
        """Get the path with backslash separators normalized to forward slashes."""
        return self.path.replace("\\", "/")


class SearchStats(BaseModel):
    """
    Counters accumulated over a walk.

    Walkers build one instance per directory and add the instances of
    their children, so totals flow back up through return values.

    Attributes:
        directories: Directories visited, the root included
        files: Files handed to the searcher
        lines: Physical lines scanned
        files_matched: Files with at least one matching line
        lines_matched: Matching lines over all files
        files_skipped: Files that could not be read as text
    """

    directories: int = Field(0, ge=0, description="Directories visited")
    files: int = Field(0, ge=0, description="Files handed to the searcher")
    lines: int = Field(0, ge=0, description="Physical lines scanned")
    files_matched: int = Field(0, ge=0, description="Files with at least one match")
    lines_matched: int = Field(0, ge=0, description="Matching lines over all files")
    files_skipped: int = Field(0, ge=0, description="Files that could not be read")

    @classmethod
    def from_file_result(cls, result: FileSearchResult) -> 'SearchStats':
        """Create the counters contributed by a single searched file."""
        return cls(
            files=1,
            lines=result.lines_scanned,
            files_matched=1 if result.has_matches() else 0,
            lines_matched=result.get_match_count(),
            files_skipped=1 if result.skipped else 0,
        )

    def __add__(self, other: 'SearchStats') -> 'SearchStats':
        if not isinstance(other, SearchStats):
            return NotImplemented
        return SearchStats(
            directories=self.directories + other.directories,
            files=self.files + other.files,
            lines=self.lines + other.lines,
            files_matched=self.files_matched + other.files_matched,
            lines_matched=self.lines_matched + other.lines_matched,
            files_skipped=self.files_skipped + other.files_skipped,
        )

    def __str__(self) -> str:
        """String representation used in the final summary."""
        text = (
            f"{self.directories} directories, {self.files} files, "
            f"{self.lines} lines scanned; "
            f"{self.lines_matched} matches in {self.files_matched} files"
        )
        if self.files_skipped:
            text += f", {self.files_skipped} skipped"
        return text
