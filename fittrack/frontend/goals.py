import logging
from typing import Dict, Optional

import requests

logger = logging.getLogger(__name__)


def response_error(response) -> str:
    """The ``error`` field of an API error body, else the HTTP reason."""
    try:
        return response.json().get("error", response.reason)
    except ValueError:
        return response.reason


def delete_goal(api_url: str, goal_id: str, headers: Dict[str, str],
                timeout: float = 10.0, http=requests) -> Optional[str]:
    """Delete a goal; returns an error message, or None on success."""
    try:
        response = http.delete(
            f"{api_url.rstrip('/')}/fitnessGoals/{goal_id}",
            headers=headers,
            timeout=timeout
        )
    except requests.RequestException as e:
        logger.warning("Goal delete failed: %s", e)
        return f"Error deleting goal: {str(e)}"
    if not response.ok:
        return response_error(response)
    return None
