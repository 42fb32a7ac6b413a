"""
配置加载与目标解析模块。

配置文件为 YAML 格式：

    default: local
    targets:
      local: http://localhost:12202/gelf
      prod: https://graylog.example.com/gelf

目标既可以是字面 URL，也可以是 targets 中的名称。
"""
import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import yaml

from graylog_client.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.graylog.yaml"

URL_RE = re.compile(r"^https?://\S+$", re.IGNORECASE)


@dataclass
class GraylogConfig:
    """目标配置。"""
    default: str = ""
    targets: Dict[str, str] = field(default_factory=dict)


def is_url(value: Optional[str]) -> bool:
    return bool(value) and bool(URL_RE.match(value))


def load_config(path: str) -> GraylogConfig:
    """从 YAML 文件加载配置。

    Args:
        path: 配置文件路径，支持 ``~``。

    Returns:
        解析后的 GraylogConfig 实例。

    Raises:
        ConfigError: 文件不存在、无法解析或结构不正确时抛出。
    """
    p = Path(os.path.expanduser(path))
    if not p.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(p) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid config file: {path}", detail=str(e)) from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")

    targets = data.get("targets") or {}
    if not isinstance(targets, dict):
        raise ConfigError(f"'targets' must be a mapping in {path}")

    cfg = GraylogConfig()
    cfg.default = str(data.get("default") or "")
    cfg.targets = {str(k): str(v) for k, v in targets.items()}
    logger.debug(f"Loaded {len(cfg.targets)} targets from {p}")
    return cfg


def resolve_target(cli_target: Optional[str], config: Optional[GraylogConfig]) -> str:
    """将命令行目标解析为 URL。

    A literal http(s) URL is returned unchanged. Otherwise ``cli_target``
    (or ``config.default`` when it is empty) names an entry of
    ``config.targets``.

    Raises:
        ConfigError: 无法得到合法 URL。
    """
    if is_url(cli_target):
        return cli_target

    if config is None:
        raise ConfigError("No config available to resolve target", detail=cli_target)

    name = cli_target or config.default
    if not name:
        raise ConfigError("No target given and no default configured")
    if name not in config.targets:
        raise ConfigError(f"Unknown target: {name}")

    url = config.targets[name]
    if not is_url(url):
        raise ConfigError(f"Target '{name}' is not an http(s) URL: {url}")
    return url
