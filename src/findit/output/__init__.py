"""
Output formatting for findit.
"""

from .reporter import Reporter

__all__ = ['Reporter']
