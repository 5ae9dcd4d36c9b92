"""CCC - Claude Code Configuration Manager."""

__version__ = "1.0.0"
