"""League table ranking."""

from .table import rank_teams, sort_key

__all__ = ["rank_teams", "sort_key"]
