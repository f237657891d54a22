"""
Search Page Hooks
Entry points the host calls on the search results page and the preferences form
"""
import html
from typing import Dict, Optional
from loguru import logger

from advanced_search.core.config_vars.config_assembler import SearchConfigAssembler
from advanced_search.core.providers import (
    InMemoryPreferenceLookup,
    PreferenceNamespaceService,
    SearchableNamespaceCurator,
    StaticLanguageCatalog,
    StaticMimeCatalog,
    StaticTooltipProvider,
)
from advanced_search.core.scope.namespace_resolver import NamespaceScopeResolver
from advanced_search.models.config import HostSearchConfig
from advanced_search.models.search import (
    DISABLE_PREFERENCE,
    PreferenceDefinition,
    SearchPageAdditions,
    SearchRequest,
    UserIdentity,
)


CLIENT_MODULES = [
    "ext.advancedSearch.init",
    "ext.advancedSearch.searchtoken",
]
CLIENT_MODULE_STYLES = ["ext.advancedSearch.initialstyles"]

DISABLE_PREFERENCE_DEFINITION = PreferenceDefinition(
    type="toggle",
    label_message="advancedsearch-preference-disable",
    section="searchoptions/advancedsearch",
    help_message="advancedsearch-preference-help",
)


def _element(tag: str, attrs: Dict[str, str], contents: str = "") -> str:
    """Element with escaped attribute values; `contents` is inserted raw."""
    rendered = "".join(f' {name}="{html.escape(value, quote=True)}"' for name, value in attrs.items())
    return f"<{tag}{rendered}>{contents}</{tag}>"


def spinner_html() -> str:
    """Loading indicator shown until the client UI has initialised."""
    return _element(
        "div",
        {"class": "mw-search-spinner"},
        _element("div", {"class": "mw-search-spinner-bounce"}),
    )


class SearchPageHooks:
    """
    Connects the opt-out check and config assembly to the host's page output
    """

    def __init__(self, assembler: SearchConfigAssembler):
        self.assembler = assembler

    @classmethod
    def from_config(
        cls,
        config: HostSearchConfig,
        preferences: Optional[InMemoryPreferenceLookup] = None
    ) -> "SearchPageHooks":
        """Wire the bundled in-process providers from host configuration."""
        preferences = preferences or InMemoryPreferenceLookup()
        resolver = NamespaceScopeResolver(PreferenceNamespaceService(preferences, config))
        languages = StaticLanguageCatalog(config.languages) if config.languages is not None else None

        assembler = SearchConfigAssembler(
            config=config,
            preferences=preferences,
            resolver=resolver,
            mime_catalog=StaticMimeCatalog(config.extension_mime_types),
            tooltips=StaticTooltipProvider(config.tooltips),
            curator=SearchableNamespaceCurator(),
            languages=languages,
        )
        logger.info(
            f"Search page hooks ready (languages {'enabled' if languages else 'disabled'})"
        )
        return cls(assembler)

    def on_search_results_prepend(
        self,
        request: SearchRequest,
        user: UserIdentity
    ) -> Optional[SearchPageAdditions]:
        """
        Additions for the search results page, or None when the user opted out.
        """
        if not self.assembler.should_activate(user):
            return None

        return SearchPageAdditions(
            html=spinner_html(),
            modules=list(CLIENT_MODULES),
            module_styles=list(CLIENT_MODULE_STYLES),
            js_config_vars=self.assembler.assemble(request, user),
        )

    def explicit_namespace_url(self, request: SearchRequest, user: UserIdentity) -> Optional[str]:
        return self.assembler.resolver.explicit_namespace_url(request, user)

    def on_get_preferences(self, user: UserIdentity, preferences: Dict[str, Dict]) -> Dict[str, Dict]:
        preferences[DISABLE_PREFERENCE] = DISABLE_PREFERENCE_DEFINITION.model_dump(by_alias=True)
        return preferences
