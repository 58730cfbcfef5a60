"""Writing generated source to its destination"""

import sys
from pathlib import Path
from typing import Union

from argen.utils.logging_manager import get_logger

logger = get_logger(__name__)

STDOUT = "-"


def write_generated_source(text: str, destination: Union[str, Path]) -> None:
    """
    Write generated source to a file, or to stdout when destination is '-'.

    Files are written as UTF-8 with unix line endings; parent directories
    are created as needed.
    """
    if str(destination) == STDOUT:
        sys.stdout.write(text)
        sys.stdout.flush()
        return

    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
    logger.info(f"Wrote generated source: {path}")
