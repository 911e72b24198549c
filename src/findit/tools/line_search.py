"""
Line search for findit.

Reads a whole file as text and keeps the lines that contain the query as a
plain substring.
"""

import logging
from pathlib import Path
from typing import List, Tuple, Union

from ..models.config import SearchConfig
from ..models.search_results import FileSearchResult, LineMatch


logger = logging.getLogger(__name__)


def printable_path(file_path: Union[str, Path]) -> str:
    """
    Get a path as text that can always be stored and printed.

    Bytes of a file name that are not valid UTF-8 arrive from the OS as
    surrogate escapes; they are replaced with U+FFFD.

    Args:
        file_path: Path to convert

    Returns:
        The path as a valid Unicode string
    """
    return str(file_path).encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def split_lines(contents: str) -> List[str]:
    """
    Split text into physical lines.

    Lines end at ``\\n``; a trailing ``\\r`` is dropped from each line and a
    final line terminator does not produce an extra empty line.

    Args:
        contents: Whole file content

    Returns:
        List of lines without terminators
    """
    if not contents:
        return []
    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def search_lines(query: str, contents: str, ignore_case: bool = False) -> Tuple[List[LineMatch], int]:
    """
    Find the lines of a text that contain the query.

    In case-insensitive mode each line is lowercased before the containment
    test; the query is expected to be lowercased already.

    Args:
        query: Substring to look for
        contents: Text to scan
        ignore_case: Whether to lowercase lines before comparing

    Returns:
        Tuple of (matching lines in order, number of lines scanned)
    """
    lines = split_lines(contents)
    matches = []
    for line_number, line in enumerate(lines, 1):
        haystack = line.lower() if ignore_case else line
        if query in haystack:
            matches.append(LineMatch(line_number=line_number, content=line))
    return matches, len(lines)


class LineSearcher:
    """
    Searches candidate files handed over by the walker.

    Implements the walker's single ``visit_file`` operation.
    """

    def __init__(self, config: SearchConfig):
        self.config = config

    def visit_file(self, file_path: Union[str, Path]) -> FileSearchResult:
        """
        Read a file as UTF-8 text and search it.

        Files that cannot be read or decoded are returned as skipped rather
        than raising, so one bad file never aborts the walk.

        Args:
            file_path: Path of the file to search

        Returns:
            FileSearchResult for the file
        """
        path = Path(file_path)
        logger.debug(f"reading {printable_path(path.name)}")
        absolute = printable_path(path.absolute())

        try:
            # newline='' keeps '\r' so only '\n' ends a line
            with open(path, 'r', encoding='utf-8', newline='') as f:
                contents = f.read()
        except UnicodeDecodeError as e:
            logger.debug(f"Skipping non-text file {absolute}: {e}")
            return FileSearchResult(path=absolute, skipped=True, error="not valid UTF-8 text")
        except OSError as e:
            logger.debug(f"Skipping unreadable file {absolute}: {e}")
            return FileSearchResult(path=absolute, skipped=True, error=str(e))

        matches, lines_scanned = search_lines(self.config.query, contents, self.config.ignore_case)
        return FileSearchResult(path=absolute, matches=matches, lines_scanned=lines_scanned)
