"""
Namespace Scope Resolver — Makes the namespaces of a search explicit.

A search without `ns<id>` parameters runs over the user's default
namespaces. Writing those into the URL keeps the result set stable when
the page is revisited through history or a shared link.
"""

import re
from typing import List, Optional
from loguru import logger

from advanced_search.core.providers.base_provider import NamespacePreferenceService
from advanced_search.core.scope.query_string import append_query
from advanced_search.models.search import SearchRequest, UserIdentity


NAMESPACE_PARAM = re.compile(r"ns[0-9]+")


class NamespaceScopeResolver:
    """
    Decides whether a search request already names its namespaces and,
    if not, builds the equivalent URL that does.
    """

    def __init__(self, namespace_service: NamespacePreferenceService):
        """
        Args:
            namespace_service: source of per-user and site default namespaces
        """
        self.namespace_service = namespace_service

    def is_namespaced_search(self, request: SearchRequest) -> bool:
        """
        True when there is no search term, or any parameter is an `ns<digits>` key.
        """
        if request.get_raw_val("search", "") == "":
            return True

        for key in request.get_value_names():
            if NAMESPACE_PARAM.fullmatch(key):
                return True
        return False

    def default_namespaces(self, user: UserIdentity) -> List[int]:
        """
        The user's own default namespaces, or the site defaults when the user has none.
        """
        return self.namespace_service.user_namespaces(user) or self.namespace_service.default_namespaces()

    def explicit_namespace_url(self, request: SearchRequest, user: UserIdentity) -> Optional[str]:
        """
        Request URL with the default namespaces appended as `ns<id>=1`,
        or None if the request is already namespaced.
        """
        if self.is_namespaced_search(request):
            return None

        query_parts = {}
        for ns in self.default_namespaces(user):
            query_parts[f"ns{ns}"] = "1"

        logger.debug(f"Adding implicit namespaces {list(query_parts)} to {request.full_url}")
        return append_query(request.full_url, query_parts)
