"""Feature flag service client.

A small wrapper around the Feature Flag Service REST API using the
``requests`` library.  Every method returns a tuple ``(data, error)``:
on success ``error`` is ``None``; on failure ``data`` is ``None`` (or
``False`` for boolean results) and ``error`` is a dictionary with keys
``status_code`` and ``message``.  The message is taken from the
``error`` field of the service's response when present.

Example::

    client = FeatureFlagClient(base_url="http://localhost:3000")
    if client.is_enabled("welcomeMessage"):
        show_welcome()
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class FeatureFlagClient:
    """Client for the feature flag endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    @staticmethod
    def _flag_path(name: str) -> str:
        return f"/flags/{quote(name, safe='')}"

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against the service.

        Returns:
            A tuple ``(data, error)`` with the parsed JSON response or
            an error description.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("Feature flag request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("Feature flag request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def list_flags(self) -> Tuple[Dict[str, bool], Optional[Error]]:
        """Retrieve all flags.  Returns an empty mapping on failure."""
        data, error = self._request("GET", "/flags")
        if error:
            return {}, error
        return data or {}, None

    def get_flag(self, name: str) -> Tuple[Optional[bool], Optional[Error]]:
        """Retrieve the value of a single flag."""
        data, error = self._request("GET", self._flag_path(name))
        if error:
            return None, error
        return data.get(name), None

    def is_enabled(self, name: str, default: bool = False) -> bool:
        """Return the flag's value, or ``default`` if it cannot be read."""
        value, error = self.get_flag(name)
        if error or value is None:
            return default
        return value

    def create_flag(self, name: str, is_enabled: bool) -> Tuple[Optional[str], Optional[Error]]:
        """Create a flag.  Returns the service's confirmation message."""
        data, error = self._request("POST", "/flags", json_body={"name": name, "isEnabled": is_enabled})
        if error:
            return None, error
        return data.get("message"), None

    def update_flag(self, name: str, is_enabled: bool) -> Tuple[Optional[str], Optional[Error]]:
        """Change the value of an existing flag."""
        data, error = self._request("PUT", self._flag_path(name), json_body={"isEnabled": is_enabled})
        if error:
            return None, error
        return data.get("message"), None

    def delete_flag(self, name: str) -> Tuple[bool, Optional[Error]]:
        """Delete a flag.  Returns ``(True, None)`` on success."""
        _, error = self._request("DELETE", self._flag_path(name))
        if error:
            return False, error
        return True, None
