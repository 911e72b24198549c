"""
Data models for findit.

This module contains all the core data structures used throughout the system.
"""

from .config import SearchConfig
from .search_results import FileSearchResult, LineMatch, SearchStats

__all__ = ['SearchConfig', 'FileSearchResult', 'LineMatch', 'SearchStats']
