"""Build the template context from group documents and render the client.

Takes the documents returned by loader.load_description and produces the
source text of one Python module.
"""
import logging
import textwrap
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit

import jinja2

from graylog_client.apigen.loader import load_description
from graylog_client.apigen.naming import NameRegistry, group_name

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "client.py.j2"


def _is_json(media_types: Optional[List[str]]) -> bool:
    return any("json" in (m or "").lower() for m in media_types or [])


def _docstring_text(text: Optional[str]) -> str:
    """Make free text safe inside a triple-quoted docstring."""
    text = (text or "").replace("\\", "\\\\").replace('"""', "'''")
    return textwrap.dedent(text).strip()


def build_operation(op: Dict[str, Any], api_path: str, group: str, group_produces, names: NameRegistry) -> Dict[str, Any]:
    """Describe one operation for the template."""
    method = (op.get("method") or op.get("httpMethod") or "GET").upper()
    nickname = op.get("nickname") or method.lower()
    params = [
        {
            "name": p["name"],
            "paramType": p.get("paramType", "query"),
            "required": bool(p.get("required")) or p.get("paramType") == "path",
            "description": _docstring_text(p.get("description")).replace("\n", " "),
        }
        for p in op.get("parameters") or []
        if isinstance(p, dict) and p.get("name")
    ]

    def names_of(kind: str) -> List[str]:
        return [p["name"] for p in params if p.get("paramType") == kind]

    body = names_of("body")
    return {
        "name": names.claim(group, nickname, method),
        "method": method,
        "path": api_path,
        "summary": _docstring_text(op.get("summary")).replace("\n", " "),
        "notes": _docstring_text(op.get("notes")),
        "required": [p for p in params if p["required"]],
        "optional": [p for p in params if not p["required"]],
        "path_params": names_of("path"),
        "query_params": names_of("query"),
        "header_params": names_of("header"),
        "form_params": names_of("form"),
        "body_param": body[0] if body else None,
        "json_response": _is_json(op.get("produces") or group_produces),
    }


def resolve_base_path(base_path: Optional[str], source_url: str) -> str:
    """Absolute base URL for a group's operations.

    A missing or relative ``basePath`` is taken against the scheme and host of
    the description URL.
    """
    parts = urlsplit(source_url)
    origin = f"{parts.scheme}://{parts.netloc}"
    if not base_path:
        return origin
    if base_path.startswith("/"):
        return origin + base_path.rstrip("/")
    return base_path.rstrip("/")


def build_context(groups: List[Dict[str, Any]], module_name: str, source_url: str) -> Dict[str, Any]:
    """Assemble the full context dict for client.py.j2."""
    names = NameRegistry()
    operations = []

    for doc in groups:
        group = group_name(doc.get("resourcePath") or doc.get("_group", ""))
        base_path = resolve_base_path(doc.get("basePath"), source_url)
        for api in doc.get("apis", []):
            if not isinstance(api, dict):
                continue
            for op in api.get("operations") or []:
                operation = build_operation(op, api.get("path", ""), group, doc.get("produces"), names)
                operation["base_path"] = base_path
                operations.append(operation)

    return {
        "module_name": module_name,
        "source_url": source_url,
        "operations": operations,
        "operation_count": len(operations),
    }


def render(context: Dict[str, Any]) -> str:
    """Render the client template to source text."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["pyrepr"] = repr
    template = env.get_template(TEMPLATE_NAME)
    return template.render(**context)


def generate(api_docs_url: str, module_name: str) -> str:
    """Fetch the API description at ``api_docs_url`` and return client source.

    Raises:
        FetchError: the root document is unreachable or malformed.
    """
    groups = load_description(api_docs_url)
    context = build_context(groups, module_name, api_docs_url)
    logger.info(f"Rendering {context['operation_count']} operations from {len(groups)} API groups")
    return render(context)
