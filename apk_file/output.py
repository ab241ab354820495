"""Write rendered results to stdout or a file."""

import logging
import sys
from pathlib import Path

from .models import Export, OutputType

logger = logging.getLogger(__name__)


def output_path(prefix: str | Path, basename: str, export: Export) -> Path:
    return Path(prefix) / f"{basename}.{export.extension}"


def write_output(
    export: Export,
    output_type: OutputType | str,
    prefix: str | Path,
    basename: str,
    stream=None,
) -> Path | None:
    """Write ``export`` to its sink. Returns the file path for file output."""
    output_type = OutputType.coerce(output_type, "output type") or OutputType.STDOUT

    if output_type is OutputType.FILE:
        path = output_path(prefix, basename, export)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(export.content)
        logger.info("wrote %s results to %s", export.format.value, path)
        return path

    stream = stream or sys.stdout.buffer
    stream.write(export.content)
    stream.flush()
    return None
