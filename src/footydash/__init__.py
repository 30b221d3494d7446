"""Football statistics dashboard: FPL rosters, league table and match odds."""

__version__ = "0.1.0"
