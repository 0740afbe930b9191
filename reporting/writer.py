"""
Text report sinks.

The printed report and the persisted report are the same string.
"""

import sys
from pathlib import Path
from typing import TextIO, Union

from .aggregator import ReportDocument


def write_report(document: ReportDocument, path: Union[str, Path]) -> Path:
    """
    Persist a report as UTF-8 text.

    Raises:
        OSError: If the file can not be written.
    """
    output_path = Path(path)
    with open(output_path, "w", encoding="utf-8", newline="\n") as f:
        f.write(document.text())
    return output_path


def emit_report(
    document: ReportDocument,
    path: Union[str, Path],
    stream: TextIO = None,
) -> Path:
    """Print a report and persist the identical text."""
    stream = stream or sys.stdout
    stream.write(document.text())
    return write_report(document, path)
