"""Data models and constants for package-contents searches."""

from dataclasses import dataclass, field
from enum import Enum

from .errors import ExtractionWarning, UnsupportedFormatError, ValidationError

COLUMNS = ("file", "package", "branch", "repository", "architecture")


class Choice(str, Enum):
    """A closed set of string values."""

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def coerce(cls, value, field_name: str):
        """Return the member for ``value``, or None for an empty value.

        Raises ValidationError naming ``field_name`` when the value is not a member.
        """
        if value is None or value == "":
            return None
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(field_name, value, cls.values()) from None


class Branch(Choice):
    EDGE = "edge"
    V3_8 = "v3.8"
    V3_7 = "v3.7"
    V3_6 = "v3.6"
    V3_5 = "v3.5"
    V3_4 = "v3.4"
    V3_3 = "v3.3"


class Repository(Choice):
    MAIN = "main"
    COMMUNITY = "community"
    TESTING = "testing"


class Architecture(Choice):
    X86 = "x86"
    X86_64 = "x86_64"
    ARMHF = "armhf"
    AARCH64 = "aarch64"
    PPC64LE = "ppc64le"
    S390X = "s390x"


class Wildcard(Choice):
    STAR = "*"
    QUESTION = "?"


class OutputType(Choice):
    STDOUT = "stdout"
    FILE = "file"


class ExportFormat(Choice):
    CSV = "csv"
    TSV = "tsv"
    YAML = "yaml"
    JSON = "json"
    XLSX = "xlsx"
    XML = "xml"
    MYSQL = "mysql"
    POSTGRES = "postgres"
    HTML = "html"
    ASCII = "ascii"
    MARKDOWN = "markdown"

    @classmethod
    def parse(cls, value) -> "ExportFormat":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedFormatError(str(value), cls.values()) from None

    @property
    def content_type(self) -> str:
        return _CONTENT_TYPES[self]

    @property
    def extension(self) -> str:
        return _EXTENSIONS.get(self, self.value)


_CONTENT_TYPES = {
    ExportFormat.CSV: "text/csv; charset=utf-8",
    ExportFormat.TSV: "text/tab-separated-values; charset=utf-8",
    ExportFormat.YAML: "application/yaml",
    ExportFormat.JSON: "application/json",
    ExportFormat.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ExportFormat.XML: "application/xml",
    ExportFormat.MYSQL: "application/sql",
    ExportFormat.POSTGRES: "application/sql",
    ExportFormat.HTML: "text/html; charset=utf-8",
    ExportFormat.ASCII: "text/plain; charset=utf-8",
    ExportFormat.MARKDOWN: "text/markdown; charset=utf-8",
}

_EXTENSIONS = {
    ExportFormat.MYSQL: "sql",
    ExportFormat.POSTGRES: "sql",
    ExportFormat.ASCII: "txt",
    ExportFormat.MARKDOWN: "md",
}


@dataclass(frozen=True)
class SearchQuery:
    """One contents lookup. Enum fields are validated on construction."""

    file_pattern: str = ""
    dir_pattern: str = ""
    branch: Branch | None = None
    repository: Repository | None = None
    architecture: Architecture | None = None

    def __post_init__(self):
        # frozen, so go through object.__setattr__
        object.__setattr__(self, "branch", Branch.coerce(self.branch, "branch"))
        object.__setattr__(self, "repository", Repository.coerce(self.repository, "repo"))
        object.__setattr__(self, "architecture", Architecture.coerce(self.architecture, "arch"))


@dataclass(frozen=True)
class FileRecord:
    """One row of the contents result table."""

    path: str = ""
    package: str = ""
    branch: str = ""
    repository: str = ""
    architecture: str = ""

    def as_row(self) -> tuple[str, ...]:
        return (self.path, self.package, self.branch, self.repository, self.architecture)

    def as_dict(self) -> dict[str, str]:
        return dict(zip(COLUMNS, self.as_row()))


@dataclass
class RecordSet:
    """Records in document row order, plus warnings raised while extracting them."""

    records: list[FileRecord] = field(default_factory=list)
    warnings: list[ExtractionWarning] = field(default_factory=list)

    def __iter__(self):
        return iter(self.records)

    def __len__(self):
        return len(self.records)

    def __getitem__(self, index):
        return self.records[index]


@dataclass
class Export:
    """Rendered output for a single format."""

    content: bytes
    format: ExportFormat

    @property
    def content_type(self) -> str:
        return self.format.content_type

    @property
    def extension(self) -> str:
        return self.format.extension
