"""
Search Models — request-scoped values passed between the host and the
scope resolver / config assembler.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Dict, Any, Optional


# Well-known keys of the client config bundle
MIME_TYPES_KEY = "advancedSearch.mimeTypes"
TOOLTIPS_KEY = "advancedSearch.tooltips"
NAMESPACE_PRESETS_KEY = "advancedSearch.namespacePresets"
DEEPCATEGORY_ENABLED_KEY = "advancedSearch.deepcategoryEnabled"
SEARCHABLE_NAMESPACES_KEY = "advancedSearch.searchableNamespaces"
EXPLICIT_NAMESPACE_URL_KEY = "advancedSearch.explicitNamespaceURL"
LANGUAGES_KEY = "advancedSearch.languages"

# User option that turns the feature off for a named account
DISABLE_PREFERENCE = "advancedsearch-disable"

ConfigBundle = Dict[str, Any]


class SearchRequest(BaseModel):
    """
    Immutable view of an inbound search request.
    `params` holds the raw query values; `full_url` is the URL as requested.
    """
    model_config = ConfigDict(frozen=True)

    params: Dict[str, str] = Field(default_factory=dict)
    full_url: str

    def get_raw_val(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Raw parameter value, or `default` when the key is missing."""
        return self.params.get(name, default)

    def get_value_names(self) -> List[str]:
        return list(self.params.keys())


class UserIdentity(BaseModel):
    """
    Opaque reference to the requesting actor.
    id 0 is an anonymous visitor; temporary accounts are never "named".
    """
    model_config = ConfigDict(frozen=True)

    id: int = 0
    name: str = ""
    temporary: bool = False

    @property
    def is_registered(self) -> bool:
        return self.id != 0

    @property
    def is_named(self) -> bool:
        return self.is_registered and not self.temporary


class PreferenceDefinition(BaseModel):
    """Declaration of a user preference contributed to the host's form."""
    type: str = "toggle"
    label_message: str = Field(serialization_alias="label-message")
    section: str
    help_message: str = Field(serialization_alias="help-message")


class SearchPageAdditions(BaseModel):
    """Everything the search results page gets from this extension."""
    html: str = ""
    modules: List[str] = Field(default_factory=list)
    module_styles: List[str] = Field(default_factory=list)
    js_config_vars: ConfigBundle = Field(default_factory=dict)
