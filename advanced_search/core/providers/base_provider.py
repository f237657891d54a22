"""
Abstract base classes for the host services the extension consumes.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Dict

from advanced_search.models.search import UserIdentity


class PreferenceLookup(ABC):
    """Read access to per-user options."""

    @abstractmethod
    def get_options(self, user: UserIdentity) -> Dict[str, Any]:
        """Every option set for the user."""
        pass

    @abstractmethod
    def get_bool_option(self, user: UserIdentity, key: str) -> bool:
        pass


class NamespacePreferenceService(ABC):
    """Which namespaces a search covers when the request names none."""

    @abstractmethod
    def user_namespaces(self, user: UserIdentity) -> List[int]:
        """Namespaces the user chose to search by default (may be empty)."""
        pass

    @abstractmethod
    def default_namespaces(self) -> List[int]:
        """Site-wide default namespaces."""
        pass


class MimeCatalogProvider(ABC):

    @abstractmethod
    def get_mime_types(self, extensions: List[str]) -> Dict[str, str]:
        pass


class TooltipProvider(ABC):

    @abstractmethod
    def generate_tooltips(self) -> Dict[str, str]:
        pass


class NamespaceCurator(ABC):

    @abstractmethod
    def curate(self, raw_namespaces: Dict[int, str]) -> Dict[int, str]:
        """Turn the engine's searchable namespaces into the list shown to users."""
        pass


class LanguageCatalog(ABC):

    @abstractmethod
    def get_language_names(self) -> Dict[str, str]:
        pass
