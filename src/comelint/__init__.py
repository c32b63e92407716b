"""comelint — linter for commit messages."""

__version__ = "1.0.0"
