"""
Search Config Assembler — Builds the configuration handed to the search UI.
"""

import copy
from typing import Optional
from loguru import logger

from advanced_search.core.providers.base_provider import (
    LanguageCatalog,
    MimeCatalogProvider,
    NamespaceCurator,
    PreferenceLookup,
    TooltipProvider,
)
from advanced_search.core.scope.namespace_resolver import NamespaceScopeResolver
from advanced_search.models.config import HostSearchConfig
from advanced_search.models.search import (
    DEEPCATEGORY_ENABLED_KEY,
    DISABLE_PREFERENCE,
    EXPLICIT_NAMESPACE_URL_KEY,
    LANGUAGES_KEY,
    MIME_TYPES_KEY,
    NAMESPACE_PRESETS_KEY,
    SEARCHABLE_NAMESPACES_KEY,
    TOOLTIPS_KEY,
    ConfigBundle,
    SearchRequest,
    UserIdentity,
)


class SearchConfigAssembler:
    """
    Decides whether the enhanced search UI runs for a user and composes
    its client config from the host services.
    """

    def __init__(
        self,
        config: HostSearchConfig,
        preferences: PreferenceLookup,
        resolver: NamespaceScopeResolver,
        mime_catalog: MimeCatalogProvider,
        tooltips: TooltipProvider,
        curator: NamespaceCurator,
        languages: Optional[LanguageCatalog] = None,
    ):
        """
        Args:
            languages: language name catalog; pass None when the language
                integration is not installed on the host
        """
        self.config = config
        self.preferences = preferences
        self.resolver = resolver
        self.mime_catalog = mime_catalog
        self.tooltips = tooltips
        self.curator = curator
        self.languages = languages

    def should_activate(self, user: UserIdentity) -> bool:
        """Only named accounts can opt out."""
        if user.is_named and self.preferences.get_bool_option(user, DISABLE_PREFERENCE):
            logger.debug(f"Advanced search disabled by user {user.id}")
            return False
        return True

    def assemble(self, request: SearchRequest, user: UserIdentity) -> ConfigBundle:
        bundle: ConfigBundle = {
            MIME_TYPES_KEY: self.mime_catalog.get_mime_types(self.config.file_extensions),
            TOOLTIPS_KEY: self.tooltips.generate_tooltips(),
            NAMESPACE_PRESETS_KEY: copy.deepcopy(self.config.namespace_presets),
            DEEPCATEGORY_ENABLED_KEY: self.config.deepcat_enabled,
            SEARCHABLE_NAMESPACES_KEY: self.curator.curate(self.config.searchable_namespaces),
            EXPLICIT_NAMESPACE_URL_KEY: self.resolver.explicit_namespace_url(request, user),
        }

        if self.languages is not None:
            bundle[LANGUAGES_KEY] = self.languages.get_language_names()

        return bundle
