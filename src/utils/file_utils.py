from pathlib import Path

from src.utils.errors import FileAccessError, INPUT_ERROR_FORMAT, OUTPUT_ERROR_FORMAT


def read_all_bytes(path: Path) -> bytes:
    """
    Read a whole file into memory.

    Raises FileAccessError naming the path if it cannot be opened or read.
    """
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise FileAccessError(INPUT_ERROR_FORMAT.format(path)) from exc


def write_all_bytes(path: Path, data: bytes) -> None:
    """
    Create (or truncate) `path` and write `data` to it.
    """
    try:
        Path(path).write_bytes(data)
    except OSError as exc:
        raise FileAccessError(OUTPUT_ERROR_FORMAT.format(path)) from exc
