"""Utility functions for loading schema text.

The schema may live in a local file or be served over HTTP(S), e.g. from a
repository shared between the apps that track the same events.
"""

from pathlib import Path
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class SchemaLoaderError(Exception):
    """Raised when schema text can't be read."""

    pass


def load_schema_from_file(file_path: str | Path) -> str:
    """Read schema text from a local file.

    Args:
        file_path: Path to the schema file.

    Returns:
        Schema text.

    Raises:
        FileNotFoundError: If file doesn't exist.
        SchemaLoaderError: If file cannot be read.
    """
    file_path = Path(file_path)
    logger.debug("Reading schema from file: %s", file_path)

    if not file_path.exists():
        logger.error("Schema file not found: %s", file_path)
        raise FileNotFoundError(f"Schema file not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning("Schema file does not have .json extension: %s", file_path)

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error reading schema file %s: %s", file_path, e)
        raise SchemaLoaderError(f"Error reading schema file {file_path}: {e}") from e

    logger.info("Loaded schema from %s", file_path)
    return text


def load_schema_from_url(url: str, timeout: int = 30) -> str:
    """Fetch schema text from a URL.

    Args:
        url: URL to fetch the schema from.
        timeout: Request timeout in seconds.

    Returns:
        Schema text.

    Raises:
        SchemaLoaderError: If URL is invalid or the request fails.
    """
    logger.debug("Fetching schema from URL: %s", url)

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error("Invalid URL format: %s", url)
        raise SchemaLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for URL: %s", url)
        raise SchemaLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error("Connection error for URL %s: %s", url, e)
        raise SchemaLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error("HTTP error %s for URL: %s", e.response.status_code, url)
        raise SchemaLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e)
        raise SchemaLoaderError(f"Request error for URL {url}: {e}") from e

    content_type = response.headers.get("content-type", "").lower()
    if "json" not in content_type and not url.endswith(".json"):
        logger.warning("URL %s does not have JSON content type: %s", url, content_type)

    logger.info("Fetched schema from %s", url)
    return response.text


def load_schema_text(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> str:
    """Read schema text from either a file or a URL.

    Args:
        file_path: Path to a local schema file (mutually exclusive with url).
        url: URL to fetch the schema from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Schema text.

    Raises:
        SchemaLoaderError: If neither or both sources are given, or loading fails.
    """
    if not file_path and not url:
        raise SchemaLoaderError("Either file_path or url must be provided")

    if file_path and url:
        raise SchemaLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_schema_from_file(file_path)
    return load_schema_from_url(url, timeout)
