"""Progress-tracking form logic, kept free of Streamlit so it can be tested.

Submitting runs ``idle -> submitting -> idle``. A successful create is always
followed by a fetch of the whole log; a failure of either request shows the
same message.
"""
import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

TOKEN_KEY = "authTokenUser"

TRACK_FAILED = "Failed to track progress"
FETCH_FAILED = "Failed to fetch progress data"
NETWORK_ERROR = "An error occurred"

IDLE = "idle"
SUBMITTING = "submitting"


def format_weight(weight: Any) -> str:
    """70.0 -> '70 kg', 70.5 -> '70.5 kg'"""
    if isinstance(weight, float) and weight.is_integer():
        weight = int(weight)
    return f"{weight} kg"


def entry_rows(entries: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Display rows for a progress table, in the order the server returned them."""
    return [
        {
            "Date": str(entry.get("date", "")),
            "Weight": format_weight(entry.get("weight")),
            "Body Measurements": entry.get("bodyMeasurements") or "",
            "Notes": entry.get("notes") or "",
        }
        for entry in entries
    ]


class ProgressTracker:
    def __init__(self, api_url: str, token: Optional[str] = None,
                 http: Optional[requests.Session] = None, timeout: float = 10.0):
        self.api_url = api_url.rstrip("/")
        self.token = token
        self.http = http or requests.Session()
        self.timeout = timeout
        self.status = IDLE
        self.entries: List[Dict[str, Any]] = []
        self.error: Optional[str] = None

    @property
    def url(self) -> str:
        return f"{self.api_url}/progress"

    def headers(self) -> Dict[str, str]:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def _fetch(self) -> Optional[List[Dict[str, Any]]]:
        response = self.http.get(self.url, headers=self.headers(), timeout=self.timeout)
        if not response.ok:
            return None
        return response.json()

    def load(self) -> bool:
        """Fetch the progress log for display."""
        self.error = None
        try:
            entries = self._fetch()
        except requests.RequestException as e:
            logger.warning("Progress fetch failed: %s", e)
            self.error = NETWORK_ERROR
            return False
        if entries is None:
            self.error = FETCH_FAILED
            return False
        self.entries = entries
        return True

    def submit(self, entry: Dict[str, Any]) -> bool:
        """Post ``entry`` and refresh the log."""
        self.status = SUBMITTING
        self.error = None
        try:
            response = self.http.post(
                self.url, json=entry, headers=self.headers(), timeout=self.timeout
            )
            if not response.ok:
                logger.info("Track progress rejected with status %s", response.status_code)
                self.error = TRACK_FAILED
                return False

            entries = self._fetch()
            if entries is None:
                self.error = TRACK_FAILED
                return False
            self.entries = entries
            return True
        except requests.RequestException as e:
            logger.warning("Track progress failed: %s", e)
            self.error = NETWORK_ERROR
            return False
        finally:
            self.status = IDLE
