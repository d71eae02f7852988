"""Logging setup for command line entry points."""

import logging

from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging with a Rich handler.

    Args:
        verbose: Log at DEBUG level instead of INFO, which also shows every
            request and host retry.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
        force=True,
    )
    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)
