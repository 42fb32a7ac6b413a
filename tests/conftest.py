"""
测试基础配置

提供 Swagger 1.2 API 描述样例以及 httpx 响应 mock 工具。
所有测试均不访问真实网络。
"""
from unittest.mock import MagicMock

import httpx
import pytest

API_DOCS_URL = "http://api.test/api-docs"

ROOT_DOC = {
    "apiVersion": "1.0",
    "swaggerVersion": "1.2",
    "apis": [
        {"path": "/pet", "description": "Operations about pets"},
        {"path": "/store", "description": "Store access"},
    ],
}

PET_DOC = {
    "basePath": "http://api.test/v1",
    "resourcePath": "/pet",
    "produces": ["application/json"],
    "apis": [
        {
            "path": "/pet/{petId}",
            "operations": [
                {
                    "method": "GET",
                    "nickname": "getPetById",
                    "summary": "Find pet by ID",
                    "notes": "Returns a pet based on ID",
                    "parameters": [
                        {"name": "petId", "paramType": "path", "required": True, "description": "ID of pet"},
                        {"name": "verbose", "paramType": "query", "required": False},
                    ],
                },
                {
                    "method": "DELETE",
                    "nickname": "getPetById",
                    "summary": "Deletes a pet",
                    "produces": ["text/plain"],
                    "parameters": [
                        {"name": "petId", "paramType": "path", "required": True},
                    ],
                },
            ],
        },
        {
            "path": "/pet",
            "operations": [
                {
                    "method": "POST",
                    "nickname": "addPet",
                    "summary": "Add a new pet",
                    "parameters": [
                        {"name": "body", "paramType": "body", "required": True},
                    ],
                },
            ],
        },
    ],
}

STORE_DOC = {
    "basePath": "http://api.test/v1",
    "resourcePath": "/store",
    "apis": [
        {
            "path": "/store/order",
            "operations": [
                {
                    "method": "GET",
                    "nickname": "listOrders",
                    "summary": "List orders",
                    "produces": ["text/html"],
                    "parameters": [],
                },
            ],
        },
    ],
}


def json_response(data, status_code=200):
    """构造一个 mock httpx 响应。"""
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = data
    if status_code >= 400:
        resp.raise_for_status.side_effect = httpx.HTTPStatusError(
            "error", request=MagicMock(), response=resp
        )
    else:
        resp.raise_for_status = MagicMock()
    return resp


@pytest.fixture
def api_docs():
    """URL -> 文档 的映射。"""
    return {
        API_DOCS_URL: ROOT_DOC,
        "http://api.test/api-docs/pet": PET_DOC,
        "http://api.test/api-docs/store": STORE_DOC,
    }


@pytest.fixture
def docs_client(api_docs):
    """按 URL 返回 api_docs 中文档的 mock httpx.Client，未知 URL 返回 404。"""
    client = MagicMock()

    def _get(url):
        if url in api_docs:
            return json_response(api_docs[url])
        return json_response({"message": "not found"}, status_code=404)

    client.get.side_effect = _get
    client.__enter__ = MagicMock(return_value=client)
    client.__exit__ = MagicMock(return_value=False)
    return client
