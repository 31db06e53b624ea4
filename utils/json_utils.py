import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def safe_json_parse(json_string: str) -> Any | None:
    """Decode JSON text, returning None (and logging why) when it is not valid JSON."""
    try:
        return json.loads(json_string)
    except (json.JSONDecodeError, TypeError) as e:
        logger.error(f"Failed to parse JSON: {e}")
        return None
