"""Read the product export (a JSON array of objects) once, before upload."""

import json
import logging
from pathlib import Path
from typing import Any

from catalog.core.errors import DataFileError

logger = logging.getLogger(__name__)


def load_records(path: str | Path) -> list[dict[str, Any]]:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError as e:
        raise DataFileError(f"Failed to open {path}: file not found") from e
    except OSError as e:
        raise DataFileError(f"Failed to read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DataFileError(f"Failed to read {path}: not valid UTF-8 ({e})") from e
    except json.JSONDecodeError as e:
        raise DataFileError(f"Failed to parse JSON in {path}: {e}") from e

    if not isinstance(data, list):
        raise DataFileError(f"{path} must contain a JSON array, got {type(data).__name__}")
    for position, item in enumerate(data):
        if not isinstance(item, dict):
            raise DataFileError(f"{path}: element {position} is {type(item).__name__}, expected an object")

    logger.info("Loaded %d documents from %s", len(data), path)
    return data
