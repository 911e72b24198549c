"""
Result reporting for findit.

Prints per-file headers, matching lines, skipped files and the final summary
to standard output through a rich Console.

File paths and line content are emitted as raw segments: rich Text would
expand tabs and strip control characters, and the output must show the line
exactly as it is in the file.
"""

from typing import Optional

from rich.console import Console
from rich.segment import Segment, Segments
from rich.style import Style
from rich.text import Text

from ..models.config import SearchConfig
from ..models.search_results import FileSearchResult, LineMatch, SearchStats


LINE_WIDTH = 80
LINE_NUMBER_WIDTH = 4

PATH_STYLE = Style(color="cyan")
LINE_NUMBER_STYLE = Style(color="blue")
SKIPPED_STYLE = Style(color="red")


class Reporter:
    """
    Writes search results as they arrive from the walker.

    In normal mode each file with matches gets its path once, followed by its
    matching lines. In invert-match mode per-line output is suppressed and the
    files without any match are listed instead.
    """

    def __init__(self, config: SearchConfig, console: Optional[Console] = None):
        self.config = config
        self.console = console if console is not None else Console(highlight=False)

    def _print_segments(self, *segments: Segment) -> None:
        # soft_wrap disables wrapping and cropping, so segment text reaches the file untouched
        self.console.print(Segments([*segments, Segment.line()]), soft_wrap=True)

    def report_file(self, result: FileSearchResult) -> None:
        """Print everything known about one searched file."""
        if result.skipped:
            self.skipped(result)
            return

        if self.config.invert_match:
            if not result.has_matches():
                self.file_header(result)
            return

        for index, match in enumerate(result.matches):
            if index == 0:
                self.file_header(result)
            self.line(match)

    def file_header(self, result: FileSearchResult) -> None:
        self._print_segments(Segment(result.display_path(), PATH_STYLE))

    def line(self, match: LineMatch) -> None:
        segments = [
            Segment(" "),
            Segment(f"{match.line_number:>{LINE_NUMBER_WIDTH}}", LINE_NUMBER_STYLE),
            Segment(": "),
            Segment(match.content[:LINE_WIDTH]),
        ]
        if len(match.content) > LINE_WIDTH:
            segments.append(Segment(" "))
            segments.append(Segment("...", LINE_NUMBER_STYLE))
        self._print_segments(*segments)

    def skipped(self, result: FileSearchResult) -> None:
        self._print_segments(
            Segment(result.display_path(), PATH_STYLE),
            Segment(" "),
            Segment("skipped", SKIPPED_STYLE),
        )

    def summary(self, stats: SearchStats) -> None:
        """Print the closing summary of the run."""
        self.console.print(Text(self.config.summarize(), style="dim"), soft_wrap=True)
        self.console.print(Text(str(stats), style="dim"), soft_wrap=True)
