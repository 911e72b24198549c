"""
Command-line configuration parser for findit.

This module turns the raw argument tokens into a validated SearchConfig. Flags
may appear anywhere among the positional arguments; the last positional is the
query and the one before it, if any, the start directory.
"""

from typing import Iterable, List, Optional
import logging
from dataclasses import dataclass, field

from pydantic import ValidationError

from ..models.config import SearchConfig


logger = logging.getLogger(__name__)


USAGE = (
    "\n\nUsage: findit [opts] [startdir] string\n"
    "   opts: -x ext, -i[gnorecase], -L[files-no-match], -d[ebug]\n\n"
)


@dataclass
class ConfigParseResult:
    """
    Raw values collected from the argument tokens.

    Attributes:
        query: Last positional token seen, None if there was none
        root_dir: Start directory
        extension: Extension filter, empty for none
        ignore_case: Whether -i was given
        invert_match: Whether -L was given
        debug: Whether -d was given
        positionals: Every positional token in order
    """
    query: Optional[str] = None
    root_dir: str = "."
    extension: str = ""
    ignore_case: bool = False
    invert_match: bool = False
    debug: bool = False
    positionals: List[str] = field(default_factory=list)


class ConfigurationError(Exception):
    """Raised when the command line does not describe a valid search."""

    def __init__(self, message: str = USAGE):
        self.message = message
        super().__init__(message)


class ConfigParser:
    """
    Argument parser for the findit command line.

    Recognized flags are ``-x <ext>``, ``-i``, ``-L`` and ``-d``. Every other
    token is positional. The first positional becomes the query; each later
    one pushes the current query into the start directory slot and takes its
    place.
    """

    FLAG_EXTENSION = "-x"
    FLAG_IGNORE_CASE = "-i"
    FLAG_INVERT_MATCH = "-L"
    FLAG_DEBUG = "-d"

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def scan(self, args: Iterable[str]) -> ConfigParseResult:
        """
        Collect flag and positional values from the tokens.

        Args:
            args: Argument tokens, program name excluded

        Returns:
            ConfigParseResult with the raw values
        """
        result = ConfigParseResult()
        tokens = iter(args)

        for token in tokens:
            if token == self.FLAG_EXTENSION:
                # a trailing -x leaves the filter unset
                result.extension = next(tokens, result.extension)
            elif token == self.FLAG_IGNORE_CASE:
                result.ignore_case = True
            elif token == self.FLAG_INVERT_MATCH:
                result.invert_match = True
            elif token == self.FLAG_DEBUG:
                result.debug = True
            else:
                result.positionals.append(token)
                if result.query:
                    result.root_dir = result.query
                result.query = token

        return result

    def parse(self, args: Iterable[str]) -> SearchConfig:
        """
        Parse argument tokens into a search configuration.

        Args:
            args: Argument tokens, program name excluded

        Returns:
            Validated SearchConfig

        Raises:
            ConfigurationError: If no query was given or the values are invalid
        """
        result = self.scan(args)

        if not result.query:
            raise ConfigurationError(USAGE)

        try:
            config = SearchConfig(
                query=result.query,
                root_dir=result.root_dir,
                extension=result.extension,
                ignore_case=result.ignore_case,
                invert_match=result.invert_match,
                debug=result.debug,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid arguments: {e}") from e

        self.logger.debug(f"Parsed configuration from {len(result.positionals)} positional arguments")
        return config


def parse_args(args: Iterable[str]) -> SearchConfig:
    """
    Convenience function to parse a command line.

    Args:
        args: Argument tokens, program name excluded

    Returns:
        Validated SearchConfig

    Raises:
        ConfigurationError: If no query was given
    """
    parser = ConfigParser()
    return parser.parse(args)
