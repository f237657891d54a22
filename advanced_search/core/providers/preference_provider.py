"""
In-memory user options. Process-local; nothing is persisted.
"""
from typing import Dict, Any, Optional
from loguru import logger

from advanced_search.core.providers.base_provider import PreferenceLookup
from advanced_search.models.search import UserIdentity


class InMemoryPreferenceLookup(PreferenceLookup):
    """
    Per-user option store keyed by user id.

    Values are interpreted the way the host stores options: "0", "", 0,
    False and None read as false.
    """

    def __init__(self, options: Optional[Dict[int, Dict[str, Any]]] = None):
        self._options: Dict[int, Dict[str, Any]] = {
            user_id: dict(values) for user_id, values in (options or {}).items()
        }

    def get_options(self, user: UserIdentity) -> Dict[str, Any]:
        """Copy of every option set for the user."""
        return dict(self._options.get(user.id, {}))

    def get_option(self, user: UserIdentity, key: str, default: Any = None) -> Any:
        return self._options.get(user.id, {}).get(key, default)

    def get_bool_option(self, user: UserIdentity, key: str) -> bool:
        value = self.get_option(user, key)
        if value in (None, "", "0"):
            return False
        return bool(value)

    def set_option(self, user: UserIdentity, key: str, value: Any):
        if not user.is_registered:
            # Anonymous visitors have nowhere to keep options
            logger.warning(f"Ignoring option '{key}' for anonymous user")
            return
        self._options.setdefault(user.id, {})[key] = value
        logger.debug(f"Option '{key}' set for user {user.id}")
