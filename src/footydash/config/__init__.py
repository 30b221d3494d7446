"""Configuration helpers: crest lookup and environment settings."""

from .crests import (
    CREST_URL_TEMPLATE,
    DEFAULT_CREST_TABLE,
    UNKNOWN_CREST_ID,
    CrestTable,
)
from .settings import Settings

__all__ = [
    "CREST_URL_TEMPLATE",
    "DEFAULT_CREST_TABLE",
    "UNKNOWN_CREST_ID",
    "CrestTable",
    "Settings",
]
