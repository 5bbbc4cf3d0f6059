"""CMS content bundle API actions."""

import httpx

from ..models.content import ContentBundle
from .base import ApiGroup


class ContentApi(ApiGroup):
    """Fetch one content bundle by reference."""

    def __init__(self, http: httpx.Client, bundle_reference: str):
        super().__init__(http)
        self.bundle_reference = bundle_reference

    def content(self) -> ContentBundle:
        path = f"/cms/contentBundles/{self.bundle_reference}"
        return self._parse(ContentBundle, self._get(path), path)
