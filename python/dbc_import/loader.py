"""Read .dbc files from disk and hand their text to the parser"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import DbcReadError
from .model import Dbc
from .parser import DbcParser

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "cp1252"


def read_dbc_text(path: str | Path, encoding: str = DEFAULT_ENCODING) -> str:
    """Return the full text of a .dbc file.

    Raises:
        DbcReadError: If the file is missing, unreadable or cannot be
            decoded with *encoding*
    """
    p = Path(path)
    try:
        text = p.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise DbcReadError(f"DBC file not found: {p}") from exc
    except UnicodeDecodeError as exc:
        raise DbcReadError(f"cannot decode {p} as {encoding}: {exc.reason}") from exc
    except OSError as exc:
        raise DbcReadError(f"cannot read {p}: {exc.strerror or exc}") from exc

    logger.info("read %d characters from %s", len(text), p)
    return text


def load_dbc(
    path: str | Path,
    encoding: str = DEFAULT_ENCODING,
    parser: DbcParser | None = None,
) -> Dbc:
    """Read and parse a .dbc file.

    Args:
        path: Path to the .dbc file
        encoding: Text encoding of the file
        parser: Parser to reuse; a new one is built if omitted

    Raises:
        DbcReadError: If the file cannot be read
        DbcParseError: If a line is malformed
    """
    text = read_dbc_text(path, encoding)
    return (parser or DbcParser()).parse(text)
