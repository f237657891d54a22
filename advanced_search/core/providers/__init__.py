"""
Host service interfaces and the in-process adapters bundled with the extension.
"""
from advanced_search.core.providers.base_provider import (
    PreferenceLookup,
    NamespacePreferenceService,
    MimeCatalogProvider,
    TooltipProvider,
    NamespaceCurator,
    LanguageCatalog,
)
from advanced_search.core.providers.preference_provider import InMemoryPreferenceLookup
from advanced_search.core.providers.namespace_provider import (
    PreferenceNamespaceService,
    SearchableNamespaceCurator,
)
from advanced_search.core.providers.catalog_provider import (
    StaticMimeCatalog,
    StaticTooltipProvider,
    StaticLanguageCatalog,
)

__all__ = [
    "PreferenceLookup",
    "NamespacePreferenceService",
    "MimeCatalogProvider",
    "TooltipProvider",
    "NamespaceCurator",
    "LanguageCatalog",
    "InMemoryPreferenceLookup",
    "PreferenceNamespaceService",
    "SearchableNamespaceCurator",
    "StaticMimeCatalog",
    "StaticTooltipProvider",
    "StaticLanguageCatalog",
]
