"""
In-memory store for feature flags.

The store maps flag names to booleans and lives only as long as the
process.  One instance is created per application (see
``feature_flag_api.app.main.create_app``) and handed to the endpoints
through a dependency, so tests can work against a fresh store.

Create and update are strict: ``create`` never overwrites an existing
flag and ``set`` never creates a missing one.  Every operation holds
the store's lock for its whole check-then-act sequence.
"""

import logging
import threading
from typing import Dict, Mapping, Optional

from feature_flag_api.app.core.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)

# Flags present when the service starts.
DEFAULT_FLAGS: Dict[str, bool] = {"welcomeMessage": True}


class FlagStore:
    """Thread-safe mapping of flag name to enabled state."""

    def __init__(self, initial: Optional[Mapping[str, bool]] = None) -> None:
        flags = DEFAULT_FLAGS if initial is None else initial
        for name, value in flags.items():
            if not isinstance(value, bool):
                raise TypeError(f"Flag {name!r} must be a bool, got {type(value).__name__}")
        self._flags: Dict[str, bool] = dict(flags)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._flags)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._flags

    def get_all(self) -> Dict[str, bool]:
        """Return a snapshot of all flags."""
        with self._lock:
            return dict(self._flags)

    def get(self, name: str) -> bool:
        """Return the value of ``name``.

        Raises ``NotFoundError`` if the flag does not exist.
        """
        with self._lock:
            try:
                return self._flags[name]
            except KeyError:
                raise NotFoundError() from None

    def set(self, name: str, value: bool) -> None:
        """Change the value of an existing flag.

        Raises ``NotFoundError`` if the flag does not exist; missing
        flags are never created here.
        """
        with self._lock:
            if name not in self._flags:
                raise NotFoundError()
            self._flags[name] = value
        logger.info("Feature flag %s set to %s", name, value)

    def create(self, name: str, value: bool) -> None:
        """Add a new flag.

        Raises ``ConflictError`` if a flag with this name exists,
        whatever its current value.
        """
        with self._lock:
            if name in self._flags:
                raise ConflictError()
            self._flags[name] = value
        logger.info("Feature flag %s created with value %s", name, value)

    def delete(self, name: str) -> None:
        """Remove a flag.  Raises ``NotFoundError`` if it does not exist."""
        with self._lock:
            if name not in self._flags:
                raise NotFoundError()
            del self._flags[name]
        logger.info("Feature flag %s deleted", name)
