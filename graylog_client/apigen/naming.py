"""Derive Python function names for generated operations.

Pattern: {group}_{nickname in snake_case}

Examples:
  /pet   getPetById      -> pet_get_pet_by_id
  /store placeOrder      -> store_place_order
  /user  (GET) user, (DELETE) user -> user_user, delete_user_user
"""
import keyword
import re
from typing import Set


def camel_to_snake(name: str) -> str:
    """Convert camelCase or PascalCase to snake_case."""
    s1 = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    return re.sub(r"([a-z\d])([A-Z])", r"\1_\2", s1).lower()


def sanitize(name: str) -> str:
    """Fold a name into a valid lowercase identifier fragment."""
    name = camel_to_snake(name)
    name = re.sub(r"\W", "_", name)
    name = re.sub(r"_+", "_", name)
    return name.strip("_")


def group_name(path: str) -> str:
    """``/pet`` -> ``pet``; ``/store/order.{format}`` -> ``store_order_format``."""
    return sanitize(path) or "api"


class NameRegistry:
    """Hands out unique function names for one generated module."""

    def __init__(self):
        self.used: Set[str] = set()

    def claim(self, group: str, nickname: str, method: str) -> str:
        """Return a unique name, prefixing the HTTP method on collision."""
        base = f"{group}_{sanitize(nickname)}".strip("_")
        if not base or base[0].isdigit():
            base = f"op_{base}"
        candidates = [base, f"{method.lower()}_{base}"]
        for name in candidates:
            if name not in self.used and not keyword.iskeyword(name):
                self.used.add(name)
                return name

        n = 2
        while f"{candidates[-1]}_{n}" in self.used:
            n += 1
        name = f"{candidates[-1]}_{n}"
        self.used.add(name)
        return name
