"""Shared decoding of collection documents into Pages."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Mapping, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from pagedlist.codec.schemas import CollectionDocument
from pagedlist.config.settings import DecoderSettings, get_settings
from pagedlist.pagination.errors import PageDecodeError
from pagedlist.pagination.page import Page, PageMeta

logger = logging.getLogger(__name__)

T = TypeVar("T")


def flatten_resource(item: Any) -> Any:
    """Merge a resource object's id/type into its attributes.

    Items without an ``attributes`` member are returned unchanged.
    """
    if not isinstance(item, Mapping) or "attributes" not in item:
        return item
    flat = dict(item.get("attributes") or {})
    for key in ("id", "type"):
        if key in item and key not in flat:
            flat[key] = item[key]
    return flat


def convert_element(item: Any, element_type: type[T]) -> T:
    """Build an *element_type* instance from one decoded data item."""
    if element_type in (object, Any):
        return item

    value = flatten_resource(item)

    if isinstance(element_type, type) and issubclass(element_type, BaseModel):
        return element_type.model_validate(value)

    if isinstance(value, element_type):
        return value

    if not isinstance(value, Mapping):
        return element_type(value)

    if dataclasses.is_dataclass(element_type):
        names = {f.name for f in dataclasses.fields(element_type) if f.init}
        return element_type(**{k: v for k, v in value.items() if k in names})

    return element_type(**value)


class DocumentPageDecoder:
    """
    Base decoder: subclasses turn raw bytes into a document mapping, this
    class turns the mapping into a Page.
    """

    format_name = "document"

    def __init__(self, settings: Optional[DecoderSettings] = None) -> None:
        self._settings = settings or get_settings().decoder

    def decode(self, raw: bytes, element_type: type[T]) -> Page[T]:
        try:
            loaded = self._load(raw)
        except Exception as exc:
            raise PageDecodeError(f"Malformed {self.format_name} page: {exc}") from exc
        return self.build_page(loaded, element_type)

    def build_page(self, loaded: Any, element_type: type[T]) -> Page[T]:
        """Validate a loaded document and convert its data items."""
        if not isinstance(loaded, Mapping):
            raise PageDecodeError(
                f"Expected a {self.format_name} object at top level, got {type(loaded).__name__}"
            )

        s = self._settings
        try:
            document = CollectionDocument.model_validate({
                "data": loaded.get(s.data_key),
                "meta": loaded.get(s.meta_key),
                "links": loaded.get(s.links_key),
            })
        except ValidationError as exc:
            raise PageDecodeError(f"Invalid collection document: {exc}") from exc

        try:
            elements = tuple(convert_element(item, element_type) for item in document.data)
        except (TypeError, ValueError) as exc:
            raise PageDecodeError(
                f"Could not convert data item to {getattr(element_type, '__name__', element_type)}: {exc}"
            ) from exc

        meta = PageMeta.from_mapping(
            document.meta,
            total_keys=s.total_keys,
            per_page_keys=s.per_page_keys,
        )
        try:
            next_locator = document.link(s.next_link_key)
        except ValueError as exc:
            raise PageDecodeError(f"Invalid next link: {exc}") from exc

        logger.debug(
            "Decoded %s page: %d elements, total=%s, next=%s",
            self.format_name,
            len(elements),
            meta.total,
            next_locator,
        )
        return Page(elements=elements, meta=meta, next_locator=next_locator)

    def _load(self, raw: bytes) -> Any:
        raise NotImplementedError
