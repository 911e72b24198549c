"""
Filesystem walker for findit.

This module traverses a directory tree, skips ignored directories and files the
extension classifier rejects, and hands every remaining file to a visitor.
Counters flow back up through return values.
"""

import os
from pathlib import Path
from typing import Callable, List, Optional, Protocol, Union
import logging

from ..models.config import SearchConfig
from ..models.search_results import FileSearchResult, SearchStats
from .filetypes import FileTypeTable, get_file_types, is_interesting
from .line_search import printable_path


logger = logging.getLogger(__name__)


class FileVisitor(Protocol):
    """Receives every file that passes the extension classifier."""

    def visit_file(self, file_path: Path) -> FileSearchResult:
        ...


class FSWalker:
    """
    Filesystem walker that traverses a directory tree depth first.

    This class provides:
    - Ignore set filtering for directory names
    - Extension filtering through the file type table
    - Deterministic, name-sorted visiting order
    - Statistics accumulated by summing per-directory results
    """

    def __init__(self, config: SearchConfig, visitor: FileVisitor,
                 on_result: Optional[Callable[[FileSearchResult], None]] = None,
                 table: Optional[FileTypeTable] = None):
        """
        Initialize the filesystem walker.

        Args:
            config: Search configuration (extension filter and debug flag)
            visitor: Object whose visit_file is called for each candidate file
            on_result: Optional callback receiving each file's result, in walk order
            table: File type table (defaults to the packaged table)
        """
        self.config = config
        self.visitor = visitor
        self.on_result = on_result
        self.table = table if table is not None else get_file_types()

    def walk(self, root: Optional[Union[str, Path]] = None) -> SearchStats:
        """
        Walk the tree rooted at root.

        Args:
            root: Directory to start from (defaults to the configured root)

        Returns:
            SearchStats for the whole tree

        Raises:
            OSError: If any directory cannot be enumerated
        """
        root_path = Path(root if root is not None else self.config.root_dir)
        logger.debug(f"Walking directory tree: {printable_path(root_path)}")
        return self._walk_directory(root_path)

    def _walk_directory(self, dir_path: Path) -> SearchStats:
        """
        Recursively walk a single directory.

        Args:
            dir_path: Directory to walk

        Returns:
            SearchStats for this directory and everything below it
        """
        logger.debug(f"visiting {printable_path(dir_path)}")
        stats = SearchStats(directories=1)

        for entry in self._list_entries(dir_path):
            entry_path = Path(entry.path)

            if entry.is_dir(follow_symlinks=False):
                if self.table.should_ignore_dir(entry.name):
                    logger.debug(f"ignoring {printable_path(entry.name)}")
                    continue
                stats = stats + self._walk_directory(entry_path)
            elif entry.is_file():
                if is_interesting(entry_path, self.config.extension, self.table):
                    stats = stats + self._visit_file(entry_path)

        return stats

    def _list_entries(self, dir_path: Path) -> List[os.DirEntry]:
        """
        Enumerate a directory, sorted by entry name.

        Args:
            dir_path: Directory to enumerate

        Returns:
            List of directory entries

        Raises:
            OSError: If the directory cannot be read
        """
        try:
            with os.scandir(dir_path) as it:
                return sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            # reported once by the caller; only traced here
            logger.debug(f"Error walking directory {printable_path(dir_path)}: {e}")
            raise

    def _visit_file(self, file_path: Path) -> SearchStats:
        """Search one candidate file and report its result."""
        result = self.visitor.visit_file(file_path)
        if self.on_result is not None:
            self.on_result(result)
        return SearchStats.from_file_result(result)
