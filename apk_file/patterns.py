"""Turn a path-like query into file and directory search patterns."""

import posixpath


def split_pattern(value: str) -> tuple[str, str]:
    """Split ``value`` into ``(file_pattern, dir_pattern)``.

    ``lib/foo`` becomes ``("foo*", "*lib")``; a bare name like ``foo`` becomes
    ``("*foo*", "")``. The directory pattern already starts with a wildcard, so
    the file pattern drops its leading one when a directory is present.
    ``.`` and ``..`` are kept as literal segments.
    """
    trimmed = value.rstrip("/") or value[:1]
    base = posixpath.basename(trimmed)
    directory = posixpath.dirname(trimmed)

    if directory in ("", "."):
        return f"*{base}*", ""
    return f"{base}*", f"*{directory}"
