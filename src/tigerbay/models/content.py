"""CMS content bundle models."""

import pydantic

from .common import ApiModel, LinkedObject


class ContentAttribute(ApiModel):
    key: str
    value: str = ""


class ContentLinkDetail(ApiModel):
    reference: str = ""
    description: str = ""
    sort_order: int = 0
    tags: list[str] = []


class ContentFile(LinkedObject):
    id: int = pydantic.Field(alias="ID")
    description: str = ""
    tags: list[str] = []
    link_detail: ContentLinkDetail | None = None


class ContentBundle(ApiModel):
    attributes: list[ContentAttribute] = []
    files: list[ContentFile] = []
