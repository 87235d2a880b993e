"""git-journal - a personal daily journal kept in git."""

__version__ = "0.1.0"
