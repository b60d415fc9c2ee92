from __future__ import annotations

import logging
from pathlib import Path

import httpx

from wordhunt.dictionary import Dictionary
from wordhunt.errors import DictionaryUnavailableError

logger = logging.getLogger("wordhunt")

# Local files shorter than this (after stripping) are treated as missing
MIN_LOCAL_TEXT = 10


def _read_local(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info("No local dictionary at %s", path)
    except OSError as e:
        logger.warning("Could not read local dictionary %s: %s", path, e)
    return ""


def fetch_dictionary_text(url: str, timeout: float = 30.0, client: httpx.Client | None = None) -> str:
    """Download a newline-delimited word list."""
    own_client = client is None
    if own_client:
        client = httpx.Client(timeout=timeout, follow_redirects=True)
    try:
        resp = client.get(url)
        resp.raise_for_status()
        logger.info("Fetched dictionary from %s (%d bytes)", url, len(resp.content))
        return resp.text
    except httpx.HTTPError as e:
        raise DictionaryUnavailableError(f"Failed to fetch dictionary from {url}: {e}") from e
    finally:
        if own_client:
            client.close()


def load_dictionary_text(
    local_path: str | Path | None,
    url: str | None,
    timeout: float = 30.0,
    client: httpx.Client | None = None,
) -> str:
    """Word list text from the local file, falling back to the remote URL."""
    text = _read_local(Path(local_path)) if local_path else ""
    if len(text.strip()) >= MIN_LOCAL_TEXT:
        return text
    if not url:
        raise DictionaryUnavailableError("No local dictionary and no fallback URL configured")
    return fetch_dictionary_text(url, timeout, client)


def load_dictionary(cfg, client: httpx.Client | None = None) -> Dictionary:
    text = load_dictionary_text(cfg.DICTIONARY_PATH, cfg.DICTIONARY_URL, cfg.DICTIONARY_TIMEOUT, client)
    return Dictionary.from_text(text)
