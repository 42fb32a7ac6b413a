"""
Syslog 级别与 facility 定义。

Severity names map to their syslog index (emerg=0 ... debug=7); a few
alternate spellings are accepted as aliases.
"""
from typing import List, Optional, Tuple

# syslog 严重级别，按严重程度排序
LEVELS = ("emerg", "alert", "crit", "error", "warning", "notice", "info", "debug")
LEVEL_VALUES = {name: idx for idx, name in enumerate(LEVELS)}

# 级别别名
LEVEL_ALIASES = {"panic": "emerg", "err": "error", "warn": "warning"}

FACILITIES = (
    "kern", "user", "mail", "daemon", "auth", "syslog", "lpr", "news",
    "uucp", "clock", "authpriv", "ftp", "ntp", "audit", "alert", "cron",
    "local0", "local1", "local2", "local3", "local4", "local5", "local6", "local7",
)
FACILITY_VALUES = {name: idx for idx, name in enumerate(FACILITIES)}


def valid_levels() -> List[str]:
    """返回合法的 syslog 级别名称列表。"""
    return list(LEVELS)


def valid_facilities() -> List[str]:
    """返回合法的 syslog facility 名称列表。"""
    return list(FACILITIES)


def resolve_level(name: str) -> Optional[Tuple[int, str]]:
    """将级别名称（含别名）解析为 (数值, 标准名称)。

    Matching is exact and case-sensitive. Returns None for unknown names.
    """
    canonical = LEVEL_ALIASES.get(name, name)
    if canonical not in LEVEL_VALUES:
        return None
    return LEVEL_VALUES[canonical], canonical
