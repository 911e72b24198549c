"""
Search tools for findit.

This module contains the directory walker, the file type classifier and the
line searcher.
"""
