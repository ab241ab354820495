"""Extract file records from a contents search results page."""

import logging

from bs4 import BeautifulSoup

from .errors import ExtractionWarning
from .models import FileRecord, RecordSet

logger = logging.getLogger(__name__)

RESULT_TABLE_SELECTOR = "table.pure-table"

# Cell index -> FileRecord field, in page column order
CELL_FIELDS = ("path", "package", "branch", "repository", "architecture")


def row_to_record(cells: list[str]) -> FileRecord:
    """Map the text of one row's cells to a FileRecord by position.

    Missing trailing cells leave their fields empty; cells past the last
    known column are ignored.
    """
    return FileRecord(**dict(zip(CELL_FIELDS, cells)))


def _row_warnings(row_index: int, cells: list[str]) -> list[ExtractionWarning]:
    if len(cells) < len(CELL_FIELDS):
        return [
            ExtractionWarning(
                row_index,
                f"row {row_index} has {len(cells)} of {len(CELL_FIELDS)} columns, missing fields left empty",
            )
        ]
    return [
        ExtractionWarning(
            row_index,
            f"unmapped value for column {column} with value {value!r}",
            column=column,
            value=value,
        )
        for column, value in enumerate(cells)
        if column >= len(CELL_FIELDS)
    ]


def extract_records(document: BeautifulSoup) -> RecordSet:
    """Read every data row of the result table, in page order.

    The header row is skipped. A page without a result table, or with only a
    header, gives an empty RecordSet.
    """
    result = RecordSet()
    table = document.select_one(RESULT_TABLE_SELECTOR)
    if table is None:
        logger.debug("no result table found")
        return result

    for row_index, row in enumerate(table.find_all("tr")[1:], start=1):
        cells = [td.get_text(strip=True) for td in row.find_all("td")]
        for warning in _row_warnings(row_index, cells):
            logger.warning(warning.message)
            result.warnings.append(warning)
        result.records.append(row_to_record(cells))

    return result
