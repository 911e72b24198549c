"""
findit - Core Package

A recursive text-search utility that walks a directory tree, skips noise
directories and binary file types, and prints the lines containing a query.
"""

__version__ = "0.1.0"
__author__ = "findit Team"
