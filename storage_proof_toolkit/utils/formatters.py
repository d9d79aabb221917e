"""Parameter sink: writes rendered parameter lines."""

import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO


def write_parameters(
    lines: Iterable[str], stream: Optional[TextIO] = None
) -> None:
    """Write parameter lines to a stream, stdout by default"""
    stream = stream if stream is not None else sys.stdout
    for line in lines:
        stream.write(line + "\n")
    stream.flush()


def save_parameters_output(
    lines: Iterable[str],
    filename: str,
    output_dir: str = "output",
) -> str:
    """
    Save parameter lines to a file with automatic directory creation.

    Args:
        lines: Rendered parameter lines
        filename: Output filename (can include subdirectories)
        output_dir: Base output directory (default: 'output')

    Returns:
        Full path to saved file
    """
    filepath = Path(output_dir) / filename
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w") as f:
        write_parameters(lines, f)

    return str(filepath)
