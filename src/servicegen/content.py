"""Media type selection for request and response content maps."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .document import MediaTypeObject, SchemaObject

BASIC_MEDIA_TYPES = (
    "application/json-patch+json",
    "application/json",
    "application/x-www-form-urlencoded",
    "text/json",
    "text/plain",
    "multipart/form-data",
    "multipart/mixed",
    "multipart/related",
    "multipart/batch",
)


@dataclass(frozen=True)
class Content:
    """A selected media type together with its schema."""

    media_type: str
    schema: SchemaObject


def get_content(content: Mapping[str, MediaTypeObject]) -> Content | None:
    """Pick one media type from a content map.

    Basic media types are tried in priority order, so JSON-like content wins
    over multipart content wherever it was declared. Any other media type is
    only considered when none of the basic ones carries a schema, in which
    case the first one (in mapping order) with a schema is used.

    Returns:
        The selected content, or None when no entry carries a schema
    """
    for media_type in BASIC_MEDIA_TYPES:
        schema = _schema_of(content.get(media_type))
        if schema is not None:
            return Content(media_type=media_type, schema=schema)

    for media_type, media in content.items():
        schema = _schema_of(media)
        if schema is not None:
            return Content(media_type=media_type, schema=schema)
    return None


def _schema_of(media: MediaTypeObject | None) -> SchemaObject | None:
    if not isinstance(media, Mapping):
        return None
    return media.get("schema")
