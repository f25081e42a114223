"""
Runtime settings for gridroute, overridable through environment variables.
"""

from pathlib import Path
import logging
import os

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Edge-list files list each edge once; insert both directions by default.
DEFAULT_UNDIRECTED = os.environ.get("GRIDROUTE_UNDIRECTED", "1").lower() not in ("0", "false", "no")

DEFAULT_JOBS_FILE = Path(__file__).parent / "jobs" / "jobs.yml"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Install a root handler. Only the CLI calls this."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
