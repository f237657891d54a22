from advanced_search.core.scope.namespace_resolver import NamespaceScopeResolver

__all__ = ["NamespaceScopeResolver"]
