"""GELF sender - posts normalized events to a Graylog HTTP input."""
import json
import logging
import threading
from typing import Any, Dict, Mapping, Tuple

import httpx

from graylog_client import __version__
from graylog_client.exceptions import NetworkError, ValidationError
from graylog_client.levels import resolve_level
from graylog_client.message import normalize

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 1.0
# 网络失败时返回的状态码
FAILURE_STATUS = 500


def _post(url: str, body: str, timeout: float) -> httpx.Response:
    """POST ``body`` with a single deadline of ``timeout`` seconds for the whole call.

    httpx timeouts apply per connect/read/write step, so the request runs in a
    daemon thread and is abandoned once the deadline passes.
    """
    headers = {
        "Content-Type": "application/json",
        "User-Agent": f"graylog-client/{__version__}",
    }
    outcome: Dict[str, Any] = {}

    def _run():
        try:
            with httpx.Client(timeout=timeout) as client:
                outcome["response"] = client.post(url, content=body, headers=headers)
        except Exception as e:
            outcome["error"] = e

    worker = threading.Thread(target=_run, name="graylog-post", daemon=True)
    worker.start()
    worker.join(timeout)

    if worker.is_alive():
        raise NetworkError(f"POST {url} failed", detail=f"no response within {timeout}s")
    error = outcome.get("error")
    if isinstance(error, httpx.HTTPError):
        raise NetworkError(f"POST {url} failed", detail=str(error)) from error
    if error is not None:
        raise error
    return outcome["response"]


def send_event(event: Mapping[str, Any], url: str, timeout: float = DEFAULT_TIMEOUT) -> Tuple[bool, int]:
    """Deliver an already-normalized event. Returns (success, status_code).

    Connection failures and timeouts never raise; they come back as
    ``(False, FAILURE_STATUS)``.
    """
    body = json.dumps(dict(event), default=str)
    try:
        resp = _post(url, body, timeout)
    except NetworkError as e:
        logger.warning(f"{e.message}: {e.detail}")
        return False, FAILURE_STATUS

    logger.debug(f"POST {url} -> {resp.status_code}")
    return resp.is_success, resp.status_code


class GraylogClient:
    """Client bound to a single GELF HTTP endpoint.

        client = GraylogClient("http://graylog.example:12202/gelf")
        client.send(message="disk full", level="crit", mount="/var")
        client.log("debug", message="cache warmed")
    """

    def __init__(self, url: str, timeout: float = DEFAULT_TIMEOUT):
        self.url = url
        self.timeout = timeout

    def send(self, **fields) -> Tuple[bool, int]:
        """Normalize ``fields`` and post them.

        Raises:
            ValidationError: reserved field present or message missing.
        """
        event = normalize(fields)
        return send_event(event, self.url, timeout=self.timeout)

    def log(self, level: str, /, **fields) -> Tuple[bool, int]:
        """Send with the level preset to ``level`` (a severity name or alias).

        Any ``level`` in ``fields`` is overwritten.
        """
        if resolve_level(level) is None:
            raise ValidationError(f"Unknown level '{level}'")
        fields["level"] = level
        return self.send(**fields)

    def __repr__(self) -> str:
        return f"GraylogClient(url={self.url!r})"
