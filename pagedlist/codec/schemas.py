"""Pydantic models for paginated collection documents."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LinkObject(BaseModel):
    """A link given as an object rather than a bare string."""

    model_config = ConfigDict(extra="allow")

    href: str
    meta: Optional[dict[str, Any]] = None


class CollectionDocument(BaseModel):
    """
    A top-level document carrying one page of a collection.

    Shaped like a JSON:API collection response: primary data, an optional
    meta object with size information and an optional links object with
    the next-page link.
    """

    model_config = ConfigDict(extra="ignore")

    data: list[Any] = Field(default_factory=list)
    meta: Optional[dict[str, Any]] = None
    links: Optional[dict[str, Any]] = None

    @field_validator("data", mode="before")
    @classmethod
    def _wrap_single_resource(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, dict):
            return [value]
        return value

    def link(self, name: str) -> Optional[str]:
        """Return the href of link *name*, or None."""
        if not self.links:
            return None
        link = self.links.get(name)
        if link is None:
            return None
        if isinstance(link, Mapping):
            return LinkObject.model_validate(link).href
        if not isinstance(link, str):
            raise ValueError(f"Link {name!r} must be a string or a link object")
        return link
