from typing import Any

NULL_SENTINEL = "NULL"


def _clean_value(value: Any) -> Any:
    if isinstance(value, str) and value.upper() == NULL_SENTINEL:
        return None
    return value


def clean_records(records: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Replace "NULL" strings (any case) with None. Returns new dicts in the same order."""
    return [{key: _clean_value(value) for key, value in record.items()} for record in records]
