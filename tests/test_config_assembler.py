import json

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
from advanced_search.models.search import SearchRequest, UserIdentity

NAMED = UserIdentity(id=5, name="Alex")
TEMP = UserIdentity(id=6, name="~2026-1", temporary=True)
ANON = UserIdentity()


def _config(**overrides) -> HostSearchConfig:
    values = {
        "file_extensions": ["png", "pdf"],
        "namespace_presets": {"discussion": {"enabled": True, "namespaces": [1, 3]}},
        "deepcat_enabled": True,
        "default_namespaces": [0, 14],
        "searchable_namespaces": {-1: "Special", 0: "", 14: "Category"},
        "extension_mime_types": {"png": "image/png"},
        "tooltips": {"advancedsearch-help-plain": "Words"},
    }
    values.update(overrides)
    return HostSearchConfig(**values)


def _assembler(
    config: HostSearchConfig | None = None,
    preferences: InMemoryPreferenceLookup | None = None,
    languages: StaticLanguageCatalog | None = None,
) -> SearchConfigAssembler:
    config = config or _config()
    preferences = preferences or InMemoryPreferenceLookup()
    return SearchConfigAssembler(
        config=config,
        preferences=preferences,
        resolver=NamespaceScopeResolver(PreferenceNamespaceService(preferences, config)),
        mime_catalog=StaticMimeCatalog(config.extension_mime_types),
        tooltips=StaticTooltipProvider(config.tooltips),
        curator=SearchableNamespaceCurator(),
        languages=languages,
    )


def _request(params: dict) -> SearchRequest:
    return SearchRequest(params=params, full_url="http://x/wiki/Special:Search?search=cat")


def test_named_user_with_disable_option_is_not_activated() -> None:
    preferences = InMemoryPreferenceLookup({NAMED.id: {"advancedsearch-disable": True}})

    assert _assembler(preferences=preferences).should_activate(NAMED) is False


def test_named_user_without_disable_option_is_activated() -> None:
    preferences = InMemoryPreferenceLookup({NAMED.id: {"advancedsearch-disable": "0"}})

    assert _assembler(preferences=preferences).should_activate(NAMED) is True


def test_anonymous_and_temporary_users_cannot_opt_out() -> None:
    preferences = InMemoryPreferenceLookup(
        {
            ANON.id: {"advancedsearch-disable": True},
            TEMP.id: {"advancedsearch-disable": True},
        }
    )
    assembler = _assembler(preferences=preferences)

    assert assembler.should_activate(ANON) is True
    assert assembler.should_activate(TEMP) is True


def test_assemble_populates_every_key() -> None:
    bundle = _assembler().assemble(_request({"search": "cat"}), ANON)

    assert list(bundle) == [
        "advancedSearch.mimeTypes",
        "advancedSearch.tooltips",
        "advancedSearch.namespacePresets",
        "advancedSearch.deepcategoryEnabled",
        "advancedSearch.searchableNamespaces",
        "advancedSearch.explicitNamespaceURL",
    ]
    assert bundle["advancedSearch.mimeTypes"] == {"png": "image/png", "pdf": "application/pdf"}
    assert bundle["advancedSearch.tooltips"] == {"advancedsearch-help-plain": "Words"}
    assert bundle["advancedSearch.namespacePresets"] == {"discussion": {"enabled": True, "namespaces": [1, 3]}}
    assert bundle["advancedSearch.deepcategoryEnabled"] is True
    assert bundle["advancedSearch.searchableNamespaces"] == {0: "", 14: "Category"}
    assert bundle["advancedSearch.explicitNamespaceURL"] == (
        "http://x/wiki/Special:Search?search=cat&ns0=1&ns14=1"
    )


def test_explicit_url_is_none_for_namespaced_request() -> None:
    bundle = _assembler().assemble(_request({"search": "cat", "ns0": "1"}), ANON)

    assert bundle["advancedSearch.explicitNamespaceURL"] is None


def test_explicit_url_follows_user_search_namespaces() -> None:
    preferences = InMemoryPreferenceLookup({NAMED.id: {"searchNs6": True, "searchNs2": "1", "searchNs0": False}})

    bundle = _assembler(preferences=preferences).assemble(_request({"search": "cat"}), NAMED)

    assert bundle["advancedSearch.explicitNamespaceURL"].endswith("?search=cat&ns2=1&ns6=1")


def test_languages_only_included_when_catalog_supplied() -> None:
    request = _request({"search": "cat"})

    without = _assembler().assemble(request, ANON)
    with_languages = _assembler(languages=StaticLanguageCatalog({"de": "Deutsch"})).assemble(request, ANON)

    assert "advancedSearch.languages" not in without
    assert with_languages["advancedSearch.languages"] == {"de": "Deutsch"}


def test_assemble_is_idempotent() -> None:
    assembler = _assembler(languages=StaticLanguageCatalog({"en": "English"}))
    request = _request({"search": "cat"})

    first = json.dumps(assembler.assemble(request, NAMED), sort_keys=False)
    second = json.dumps(assembler.assemble(request, NAMED), sort_keys=False)

    assert first == second


def test_mutating_a_bundle_does_not_leak_into_the_next() -> None:
    assembler = _assembler(_config(namespace_presets={"all": {"enabled": True}}))
    request = _request({"search": "cat"})

    first = assembler.assemble(request, ANON)
    first["advancedSearch.namespacePresets"]["all"]["enabled"] = False
    second = assembler.assemble(request, ANON)

    assert second["advancedSearch.namespacePresets"] == {"all": {"enabled": True}}
    assert assembler.config.namespace_presets == {"all": {"enabled": True}}
