"""Free-text ``key:value`` / ``key=value`` parsing for the command line."""
import re
from typing import Dict

# 键以行首或空白开头，后跟 ':' 或 '='
KEY_RE = re.compile(r"(?:^|(?<=\s))(\w+)[:=]")


def _clean(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        value = value[1:-1]
    return value


def parse_key_values(text: str) -> Dict[str, str]:
    """Split free text into a dict of string pairs.

    Each whitespace-bounded ``word:`` or ``word=`` token starts a new pair and
    the value runs up to the next such token. Matching surrounding quotes are
    stripped. Words that appear without a separator become keys with an empty
    value; later duplicates win.

        >>> parse_key_values("level:warn message='hello world' count:3")
        {'level': 'warn', 'message': 'hello world', 'count': '3'}
    """
    result: Dict[str, str] = {}
    matches = list(KEY_RE.finditer(text))

    leading = text[:matches[0].start()] if matches else text
    for word in leading.split():
        result[word] = ""

    for i, m in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        result[m.group(1)] = _clean(text[m.end():end])
    return result
