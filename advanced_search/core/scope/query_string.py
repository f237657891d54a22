"""
Helpers for adding parameters to an existing URL.
"""
from typing import Dict
from urllib.parse import urlencode


def append_query(url: str, query: Dict[str, str]) -> str:
    """
    Append `query` to `url`, keeping the existing query string and any
    #fragment as they are. An empty `query` returns the URL unchanged.
    """
    query_string = urlencode(query)
    if not query_string:
        return url

    url, hash_sign, fragment = url.partition("#")
    url += ("&" if "?" in url else "?") + query_string
    if hash_sign:
        url += hash_sign + fragment
    return url
