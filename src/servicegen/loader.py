from __future__ import annotations

import json
import logging
from os import PathLike
from pathlib import Path
from typing import Mapping, cast
from urllib.parse import urlparse
from urllib.request import Request, urlopen

import yaml

from .document import ClientDocument
from .errors import SpecError

logger = logging.getLogger(__name__)

DocumentSource = str | PathLike[str] | Mapping[str, object]


def load_document(source: DocumentSource) -> ClientDocument:
    """Load a normalized client document from various sources.

    Args:
        source: Can be a file path (str or PathLike), URL, or a dict-like object

    Returns:
        The client document

    Raises:
        SpecError: If the document is not an object or has no services list
    """
    document = _read_source(source)
    if not isinstance(document, dict):
        raise SpecError("Client document must be an object")
    services = document.get("services")
    if not isinstance(services, list):
        raise SpecError("Missing or invalid 'services' field in document")
    models = document.get("models", [])
    if not isinstance(models, list):
        raise SpecError("Invalid 'models' field in document")
    return cast(ClientDocument, document)


def load_mapping(source: DocumentSource) -> dict[str, object]:
    """Load any JSON or YAML object, such as a generator configuration file."""
    data = _read_source(source)
    if not isinstance(data, dict):
        raise SpecError(f"Expected an object in {source}")
    return cast(dict[str, object], data)


def _is_url(source: str) -> bool:
    """Check if a source string is an HTTP(S) URL."""
    parsed = urlparse(source)
    return parsed.scheme in {"http", "https"}


def _fetch_url(url: str) -> str:
    """Fetch content from a URL.

    Raises:
        SpecError: If the URL cannot be fetched
    """
    try:
        request = Request(url, headers={"User-Agent": "servicegen"})
        with urlopen(request, timeout=30) as response:  # noqa: S310
            return response.read().decode("utf-8")
    except OSError as exc:
        raise SpecError(f"Failed to fetch URL: {url}") from exc


def _get_url_extension(url: str) -> str:
    """Extract file extension from URL path."""
    path = urlparse(url).path
    if "." in path:
        return "." + path.rsplit(".", 1)[-1].lower()
    return ""


def _read_source(source: DocumentSource) -> object:
    if isinstance(source, Mapping):
        return dict(source)

    source_str = str(source) if isinstance(source, PathLike) else source

    if _is_url(source_str):
        logger.debug("fetching %s", source_str)
        text = _fetch_url(source_str)
        if _get_url_extension(source_str) in {".yaml", ".yml"}:
            return _load_yaml(text)
        return _load_json_or_yaml(text)

    path = Path(source_str)
    logger.debug("reading %s", path)
    text = path.read_text(encoding="utf-8")
    if path.suffix in {".yaml", ".yml"}:
        return _load_yaml(text)
    return _load_json_or_yaml(text)


def _load_json_or_yaml(text: str) -> object:
    """Try to load as JSON, fall back to YAML if that fails."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return _load_yaml(text)


def _load_yaml(text: str) -> object:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SpecError(f"Invalid YAML document: {exc}") from exc
