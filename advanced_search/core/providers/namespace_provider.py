"""
Namespace services backed by user options and host configuration.
"""
import re
from typing import List, Dict

from advanced_search.core.providers.base_provider import NamespaceCurator, NamespacePreferenceService, PreferenceLookup
from advanced_search.models.config import HostSearchConfig
from advanced_search.models.search import UserIdentity


MAIN_NAMESPACE = 0

_SEARCH_NS_OPTION = re.compile(r"searchNs([0-9]+)")


class PreferenceNamespaceService(NamespacePreferenceService):
    """
    Reads a user's default search namespaces from `searchNs<id>` options,
    with the site defaults taken from the host config.
    """

    def __init__(self, preferences: PreferenceLookup, config: HostSearchConfig):
        self.preferences = preferences
        self.config = config

    def user_namespaces(self, user: UserIdentity) -> List[int]:
        namespaces = []
        for key in self.preferences.get_options(user):
            match = _SEARCH_NS_OPTION.fullmatch(key)
            if match and self.preferences.get_bool_option(user, key):
                namespaces.append(int(match.group(1)))
        return sorted(namespaces)

    def default_namespaces(self) -> List[int]:
        return list(self.config.default_namespaces)


class SearchableNamespaceCurator(NamespaceCurator):
    """
    Drops virtual (negative) namespaces and makes sure the main namespace
    is listed, ordered by id.
    """

    def curate(self, raw_namespaces: Dict[int, str]) -> Dict[int, str]:
        curated = {ns: name for ns, name in raw_namespaces.items() if ns >= 0}
        curated.setdefault(MAIN_NAMESPACE, "")
        return dict(sorted(curated.items()))
