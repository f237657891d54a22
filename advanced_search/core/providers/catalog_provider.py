"""
Static catalogs handed to the client. They only return data the host supplies.
"""
import mimetypes
from typing import List, Dict, Optional

from advanced_search.core.providers.base_provider import LanguageCatalog, MimeCatalogProvider, TooltipProvider


class StaticMimeCatalog(MimeCatalogProvider):
    """
    Maps file extensions to mime types from a supplied table, falling back
    to the `mimetypes` registry. Unknown extensions are left out.
    """

    def __init__(self, extension_mime_types: Optional[Dict[str, str]] = None):
        self.extension_mime_types = {
            ext.lower(): mime for ext, mime in (extension_mime_types or {}).items()
        }

    def get_mime_types(self, extensions: List[str]) -> Dict[str, str]:
        mime_types = {}
        for ext in extensions:
            ext = ext.lower().lstrip(".")
            mime = self.extension_mime_types.get(ext)
            if mime is None:
                mime, _ = mimetypes.guess_type(f"file.{ext}", strict=False)
            if mime:
                mime_types[ext] = mime
        return mime_types


class StaticTooltipProvider(TooltipProvider):

    def __init__(self, tooltips: Optional[Dict[str, str]] = None):
        self.tooltips = dict(tooltips or {})

    def generate_tooltips(self) -> Dict[str, str]:
        return dict(self.tooltips)


class StaticLanguageCatalog(LanguageCatalog):

    def __init__(self, languages: Dict[str, str]):
        self.languages = dict(languages)

    def get_language_names(self) -> Dict[str, str]:
        return dict(self.languages)
