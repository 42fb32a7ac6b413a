"""
GELF 消息规范化模块。

校验输入字段，补充 short_message / uuid / datetime / timestr / host 等派生字段，
并将文字形式的 level 转换为 syslog 数值。
"""
import logging
import re
import socket
import time
import uuid
from typing import Any, Dict, Mapping

from graylog_client.exceptions import ValidationError
from graylog_client.levels import resolve_level

logger = logging.getLogger(__name__)

# 由本模块生成的字段，调用方不得传入。
# count 也在其中：服务端接受该字段但会静默丢弃。
RESERVED_FIELDS = frozenset({"uuid", "datetime", "timestr", "count"})

# 派生完成后从载荷中移除的字段
DROPPED_FIELDS = ("server", "message")

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

NUMERIC_RE = re.compile(r"^\d+$")


def normalize(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """将任意键值数据转换为可直接序列化的 GELF 事件。

    Args:
        fields: 用户提供的字段，必须包含非空的 message。

    Returns:
        新的扁平字典，输入不会被修改。

    Raises:
        ValidationError: 包含保留字段，或缺少 message。
    """
    for name in sorted(RESERVED_FIELDS):
        if name in fields:
            raise ValidationError(f"Field '{name}' not allowed")

    if not fields.get("message"):
        raise ValidationError("message field is required")

    event = dict(fields)
    now = time.time()
    event["short_message"] = event["message"]
    event["uuid"] = str(uuid.uuid4())
    event["datetime"] = int(now)
    event["timestr"] = time.strftime(TIME_FORMAT, time.gmtime(now))
    event["host"] = event.get("server") or event.get("host") or socket.gethostname()

    level = event.get("level")
    if level is not None and not NUMERIC_RE.match(str(level)):
        resolved = resolve_level(str(level))
        if resolved:
            event["level"], event["levelstr"] = resolved
        else:
            logger.debug("Unknown level %r passed through unchanged", level)

    for name in DROPPED_FIELDS:
        event.pop(name, None)

    return event
