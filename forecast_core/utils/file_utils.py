"""File I/O utilities for forecast JSON output."""
from pathlib import Path
from typing import Any, List

import orjson

from forecast_core.models.forecast import DailyForecast


def forecasts_to_json(forecasts: List[DailyForecast], indent: bool = True) -> bytes:
    """Serialize forecasts to JSON bytes."""
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps([f.to_dict() for f in forecasts], option=option)


def save_json(data: Any, file_path: Path) -> None:
    """Save JSON-serializable data (or pre-encoded bytes) to a file."""
    file_path.parent.mkdir(parents=True, exist_ok=True)
    payload = data if isinstance(data, bytes) else orjson.dumps(data, option=orjson.OPT_INDENT_2)
    with open(file_path, "wb") as f:
        f.write(payload)
