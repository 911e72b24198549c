"""
Search driver for findit.

Wires the walker, the line searcher and the reporter together for one run.
"""

import logging
from typing import Optional

from .models.config import SearchConfig
from .models.search_results import SearchStats
from .output.reporter import Reporter
from .tools.fs_walker import FSWalker
from .tools.line_search import LineSearcher


logger = logging.getLogger(__name__)


def run(config: SearchConfig, reporter: Optional[Reporter] = None) -> SearchStats:
    """
    Search the configured tree and report every result.

    Args:
        config: Search configuration
        reporter: Reporter to print through (a stdout reporter by default)

    Returns:
        SearchStats for the whole run

    Raises:
        OSError: If a directory cannot be enumerated
    """
    if reporter is None:
        reporter = Reporter(config)

    walker = FSWalker(config, LineSearcher(config), on_result=reporter.report_file)
    stats = walker.walk(config.root_dir)
    reporter.summary(stats)

    logger.debug(f"Search finished: {stats}")
    return stats
