"""Utility functions for loading API schema documents.

This module provides functions for loading JSON from files and URLs with
proper error handling, and for locating the schema map inside a document.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class SchemaLoaderError(Exception):
    """Custom exception for schema document loading errors."""

    pass


def load_json_from_file(file_path: str | Path) -> Any:
    """Load JSON data from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Parsed JSON data.

    Raises:
        SchemaLoaderError: If the file is missing, unreadable or not valid JSON.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load JSON from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise SchemaLoaderError(f"File not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info(f"Successfully loaded JSON from {file_path}")
        return data
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in file {file_path}: {e}")
        raise SchemaLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}")
        raise SchemaLoaderError(f"Error reading file {file_path}: {e}") from e


def load_json_from_url(url: str, timeout: int = 30) -> Any:
    """Load JSON data from a URL.

    Args:
        url: URL to fetch JSON from.
        timeout: Request timeout in seconds.

    Returns:
        Parsed JSON data.

    Raises:
        SchemaLoaderError: If the request fails or the response isn't valid JSON.
    """
    logger.debug(f"Attempting to load JSON from URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
        logger.info(f"Successfully loaded JSON from {url}")
        return data

    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise SchemaLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise SchemaLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except ValueError as e:
        # Undecodable bodies raise a ValueError subclass, which newer
        # requests releases also derive from RequestException
        logger.error(f"Invalid JSON response from URL {url}: {e}")
        raise SchemaLoaderError(f"Invalid JSON response from URL {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}")
        raise SchemaLoaderError(f"Request error for URL {url}: {e}") from e


def is_url(source: str | Path) -> bool:
    """Check whether an input source is an http(s) URL."""
    parsed = urlparse(str(source))
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def load_schema_document(source: str | Path, timeout: int = 30) -> dict[str, Any]:
    """Load an API document from a file path or an http(s) URL.

    Args:
        source: File path or URL.
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        The parsed document.

    Raises:
        SchemaLoaderError: If loading fails or the document is not a JSON object.
    """
    if is_url(source):
        document = load_json_from_url(str(source), timeout)
    else:
        document = load_json_from_file(source)

    if not isinstance(document, dict):
        raise SchemaLoaderError(f"API document must be a JSON object: {source}")
    return document


def extract_schema_map(document: dict[str, Any]) -> dict[str, Any]:
    """Locate the named schemas of an API document.

    OpenAPI 3 documents keep them under ``components.schemas``, Swagger 2
    documents under ``definitions``. The first one found wins.

    Args:
        document: Parsed API document.

    Returns:
        Schema name to schema fragment, empty if neither key is present.
    """
    components = document.get("components")
    if isinstance(components, dict) and isinstance(components.get("schemas"), dict):
        return components["schemas"]

    definitions = document.get("definitions")
    if isinstance(definitions, dict):
        return definitions

    logger.warning("No components.schemas or definitions found in document")
    return {}
