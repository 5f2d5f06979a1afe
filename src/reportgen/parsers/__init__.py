"""Coverage model sources."""

from .base import Parser, StaticParser
from .json_parser import JsonModelParser

__all__ = ["Parser", "StaticParser", "JsonModelParser"]
