"""
This facade exposes the public API for the parser module.
"""
from .source_file import SourceFile
from .typescript_parser import parse_source, parse_file, get_parser

__all__ = ["SourceFile", "parse_source", "parse_file", "get_parser"]
