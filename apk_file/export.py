"""Render file records in one of the supported output formats."""

import csv
import html
import io
import json
import re
import unicodedata
from collections.abc import Iterable

import yaml
from lxml import etree
from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from .models import COLUMNS, Export, ExportFormat, FileRecord

WORKSHEET_TITLE = "contents"

# Code points XML 1.0 cannot carry, even escaped
XML_ILLEGAL_CHARACTERS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def _delimited(rows, delimiter: str) -> bytes:
    buf = io.StringIO()
    writer = csv.writer(buf, delimiter=delimiter, lineterminator="\n")
    writer.writerow(COLUMNS)
    writer.writerows(rows)
    return buf.getvalue().encode("utf-8")


def _as_dicts(rows) -> list[dict[str, str]]:
    return [dict(zip(COLUMNS, row)) for row in rows]


def render_csv(rows, output_name):
    return _delimited(rows, ",")


def render_tsv(rows, output_name):
    return _delimited(rows, "\t")


def render_json(rows, output_name):
    return (json.dumps(_as_dicts(rows), indent=2, ensure_ascii=False) + "\n").encode("utf-8")


def render_yaml(rows, output_name):
    text = yaml.safe_dump(_as_dicts(rows), sort_keys=False, allow_unicode=True, default_flow_style=False)
    return text.encode("utf-8")


def render_xml(rows, output_name):
    root = etree.Element("dataset")
    for row in rows:
        node = etree.SubElement(root, "row")
        for column, value in zip(COLUMNS, row):
            etree.SubElement(node, column).text = XML_ILLEGAL_CHARACTERS_RE.sub("", value)
    return etree.tostring(root, pretty_print=True, xml_declaration=True, encoding="UTF-8")


def render_xlsx(rows, output_name):
    wb = Workbook()
    ws = wb.active
    ws.title = WORKSHEET_TITLE
    ws.append(list(COLUMNS))
    for row in rows:
        ws.append([ILLEGAL_CHARACTERS_RE.sub("", v) for v in row])
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def _mysql_identifier(name: str) -> str:
    return "`" + name.replace("`", "``") + "`"


def _mysql_literal(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "''") + "'"


def _postgres_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def _postgres_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def _sql(rows, table: str, identifier, literal, begin: str) -> bytes:
    """CREATE TABLE plus one multi-row INSERT, inside a transaction."""
    name = identifier(table)
    columns = [identifier(c) for c in COLUMNS]

    lines = [begin, f"CREATE TABLE IF NOT EXISTS {name} ("]
    lines.append(",\n".join(f"    {c} TEXT" for c in columns))
    lines.append(");")
    if rows:
        lines.append(f"INSERT INTO {name} ({', '.join(columns)}) VALUES")
        values = ["    (" + ", ".join(literal(v) for v in row) + ")" for row in rows]
        lines.append(",\n".join(values) + ";")
    lines.append("COMMIT;")
    return ("\n".join(lines) + "\n").encode("utf-8")


def render_mysql(rows, output_name):
    return _sql(rows, output_name, _mysql_identifier, _mysql_literal, "START TRANSACTION;")


def render_postgres(rows, output_name):
    return _sql(rows, output_name, _postgres_identifier, _postgres_literal, "BEGIN;")


def display_width(text: str) -> int:
    """Terminal columns taken by ``text``: wide East Asian characters count twice."""
    width = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return width


def _pad(text: str, width: int) -> str:
    return text + " " * (width - display_width(text))


def _column_widths(rows) -> list[int]:
    return [
        max([display_width(column)] + [display_width(row[i]) for row in rows])
        for i, column in enumerate(COLUMNS)
    ]


def render_ascii(rows, output_name):
    widths = _column_widths(rows)

    def border(fill):
        return "+" + "+".join(fill * (w + 2) for w in widths) + "+"

    def line(cells):
        return "| " + " | ".join(_pad(c, w) for c, w in zip(cells, widths)) + " |"

    out = [border("-"), line(COLUMNS), border("=")]
    for row in rows:
        out.append(line(row))
        out.append(border("-"))
    return ("\n".join(out) + "\n").encode("utf-8")


def render_markdown(rows, output_name):
    rows = [tuple(v.replace("|", "\\|") for v in row) for row in rows]
    widths = [max(w, 3) for w in _column_widths(rows)]

    def line(cells):
        return "| " + " | ".join(_pad(c, w) for c, w in zip(cells, widths)) + " |"

    out = [line(COLUMNS), "| " + " | ".join("-" * w for w in widths) + " |"]
    out.extend(line(row) for row in rows)
    return ("\n".join(out) + "\n").encode("utf-8")


def render_html(rows, output_name):
    def cells(tag, values):
        return "".join(f"<{tag}>{html.escape(v)}</{tag}>" for v in values)

    out = ["<table>", "  <thead>", f"    <tr>{cells('th', COLUMNS)}</tr>", "  </thead>", "  <tbody>"]
    out.extend(f"    <tr>{cells('td', row)}</tr>" for row in rows)
    out.extend(["  </tbody>", "</table>"])
    return ("\n".join(out) + "\n").encode("utf-8")


RENDERERS = {
    ExportFormat.CSV: render_csv,
    ExportFormat.TSV: render_tsv,
    ExportFormat.YAML: render_yaml,
    ExportFormat.JSON: render_json,
    ExportFormat.XLSX: render_xlsx,
    ExportFormat.XML: render_xml,
    ExportFormat.MYSQL: render_mysql,
    ExportFormat.POSTGRES: render_postgres,
    ExportFormat.HTML: render_html,
    ExportFormat.ASCII: render_ascii,
    ExportFormat.MARKDOWN: render_markdown,
}


def export(records: Iterable[FileRecord], fmt: ExportFormat | str, output_name: str = "results") -> Export:
    """Render ``records`` as ``fmt``.

    ``output_name`` is the table name for the SQL formats. Raises
    UnsupportedFormatError before rendering anything if ``fmt`` is unknown.
    """
    fmt = ExportFormat.parse(fmt)
    rows = [record.as_row() for record in records]
    return Export(content=RENDERERS[fmt](rows, output_name), format=fmt)
