"""Fetch the API description documents over HTTP.

The root document lists API groups; each group path is fetched relative to
the root URL.
"""
import logging
from typing import Any, Dict, List

import httpx

from graylog_client.exceptions import FetchError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

_BRACE_ESCAPES = str.maketrans({"{": "%7B", "}": "%7D"})


def escape_braces(url: str) -> str:
    """Percent-escape ``{`` and ``}`` so placeholder paths can be requested."""
    return url.translate(_BRACE_ESCAPES)


def _get_json(client: httpx.Client, url: str) -> Any:
    try:
        resp = client.get(escape_braces(url))
        resp.raise_for_status()
        return resp.json()
    except (httpx.HTTPError, ValueError) as e:
        raise FetchError(f"Failed to fetch {url}", detail=str(e)) from e


def base_url(api_docs_url: str) -> str:
    """Root URL that group paths are appended to."""
    return api_docs_url.rstrip("/")


def load_root(client: httpx.Client, api_docs_url: str) -> Dict[str, Any]:
    """Fetch the resource listing.

    Raises:
        FetchError: unreachable, not JSON, or no ``apis`` list.
    """
    doc = _get_json(client, api_docs_url)
    if not isinstance(doc, dict) or not isinstance(doc.get("apis"), list):
        raise FetchError(f"No 'apis' list in {api_docs_url}")
    return doc


def load_groups(client: httpx.Client, api_docs_url: str, root: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Fetch every group document listed in ``root``.

    Groups that fail to load or have no ``apis`` list are logged and skipped.
    Each returned document carries the listing entry's path under ``_group``.
    """
    base = base_url(api_docs_url)
    groups = []
    for entry in root["apis"]:
        path = entry.get("path", "") if isinstance(entry, dict) else ""
        if not path:
            logger.warning(f"Skipping API group without a path: {entry!r}")
            continue
        url = f"{base}{path}"
        try:
            doc = _get_json(client, url)
        except FetchError as e:
            logger.warning(f"Skipping API group {path}: {e.detail}")
            continue
        if not isinstance(doc, dict) or not isinstance(doc.get("apis"), list):
            logger.warning(f"Skipping API group {path}: no 'apis' list")
            continue
        doc["_group"] = path
        groups.append(doc)
        logger.debug(f"Loaded API group {path} ({len(doc['apis'])} apis)")
    return groups


def load_description(api_docs_url: str, timeout: float = DEFAULT_TIMEOUT) -> List[Dict[str, Any]]:
    """Fetch the root listing and all reachable group documents."""
    with httpx.Client(timeout=timeout, follow_redirects=True) as client:
        root = load_root(client, api_docs_url)
        return load_groups(client, api_docs_url, root)
