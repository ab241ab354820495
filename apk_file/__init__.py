"""Search Alpine package contents from the command line.

Looks up a file pattern in the pkgs.alpinelinux.org contents index and
renders the matching files as csv, tsv, json, yaml, xlsx, xml, sql, html,
ascii or markdown.
"""

__version__ = "0.1.0"

from .cli import main
from .export import export
from .models import ExportFormat, FileRecord, RecordSet, SearchQuery
from .patterns import split_pattern
from .query import build_query

__all__ = [
    "__version__",
    "build_query",
    "main",
    "export",
    "split_pattern",
    "ExportFormat",
    "FileRecord",
    "RecordSet",
    "SearchQuery",
]
