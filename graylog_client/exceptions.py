"""
异常定义模块 (Exception Definitions)

定义客户端库和代码生成器使用的业务异常类。CLI 层捕获这些异常并转换为退出码。

Business exception classes raised by the client library and the API client
generator. The command-line entry points catch them and map them to exit codes.
"""
from typing import Optional


class GraylogError(Exception):
    """异常基类 (Base Exception)"""
    error: str = "graylog_error"

    def __init__(self, message: str, detail: Optional[str] = None):
        self.message = message
        self.detail = detail
        super().__init__(message)


class ValidationError(GraylogError):
    """消息字段校验失败 (Message Validation Error)"""
    error = "validation_error"


class ConfigError(GraylogError):
    """目标地址无法解析 (Target Resolution Error)"""
    error = "config_error"


class NetworkError(GraylogError):
    """连接失败或超时 (Connection / Timeout Error)"""
    error = "network_error"


class FetchError(GraylogError):
    """API 描述文档获取失败 (API Description Fetch Error)"""
    error = "fetch_error"


class MissingParameterError(GraylogError):
    """生成的客户端缺少必填参数 (Missing Required Parameter)"""
    error = "missing_parameter"

    def __init__(self, parameter: str, detail: Optional[str] = None):
        self.parameter = parameter
        super().__init__(f"Missing required parameter: {parameter}", detail)
