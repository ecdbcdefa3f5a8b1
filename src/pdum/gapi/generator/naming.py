"""Identifier derivation for generated modules."""

from __future__ import annotations

import keyword
import re
from typing import Iterable

_NON_ALNUM = re.compile(r"[^0-9A-Za-z]+")
_CAMEL_WORD = re.compile(r"(.)([A-Z][a-z]+)")
_CAMEL_TAIL = re.compile(r"([a-z0-9])([A-Z])")


def safe_identifier(name: str) -> str:
    """Make ``name`` a usable Python identifier (keywords get a trailing underscore)."""
    name = _NON_ALNUM.sub("_", name).strip("_") or "_"
    if name[0].isdigit():
        name = f"n{name}"
    if keyword.iskeyword(name):
        name = f"{name}_"
    return name


def snake_case(name: str) -> str:
    """``"reportStateAndNotification"`` -> ``"report_state_and_notification"``.

    Example:
        >>> snake_case("V2GetKeyStringResponse")
        'v2_get_key_string_response'
        >>> snake_case("$.xgafv")
        'xgafv'
    """
    text = _NON_ALNUM.sub("_", name)
    text = _CAMEL_WORD.sub(r"\1_\2", text)
    text = _CAMEL_TAIL.sub(r"\1_\2", text)
    text = re.sub(r"_+", "_", text.lower()).strip("_")
    return safe_identifier(text)


def pascal_case(name: str) -> str:
    """``"device_info"``/``"deviceInfo"`` -> ``"DeviceInfo"``."""
    parts = [p for p in _NON_ALNUM.split(name) if p]
    return "".join(p[0].upper() + p[1:] for p in parts)


def primary_name(name: str, title_words: Iterable[str]) -> str:
    """Name the client class after the title words that spell out ``name``.

    Title words are consumed in order whenever they match the next part of
    the API name, which keeps the title's capitalization; whatever is left of
    the name is appended capitalized.

    Example:
        >>> primary_name("apikeys", "API Keys API".split())
        'APIKeys'
        >>> primary_name("analyticsadmin", "Google Analytics Admin API".split())
        'AnalyticsAdmin'
        >>> primary_name("iam", "Identity and Access Management (IAM) API".split())
        'IAM'
    """
    remaining = _NON_ALNUM.sub("", name).lower()
    result = ""
    for word in title_words:
        if not remaining:
            break
        word = _NON_ALNUM.sub("", word)
        if word and remaining.startswith(word.lower()):
            result += word
            remaining = remaining[len(word):]
    if remaining:
        result += remaining[0].upper() + remaining[1:]
    return safe_identifier(result)


def method_name(method_id: str) -> str:
    """Python name of a method from its Discovery id, without the service prefix.

    Example:
        >>> method_name("homegraph.agentUsers.delete")
        'agent_users_delete'
    """
    parts = method_id.split(".")[1:] or method_id.split(".")
    return "_".join(snake_case(p) for p in parts)


def module_name(name: str, version: str) -> str:
    """``("admin", "reports_v1")`` -> ``"admin_reports_v1"``."""
    return safe_identifier(f"{name}_{version}".lower())


def class_name(schema_id: str) -> str:
    """Python class name for a schema id."""
    text = _NON_ALNUM.sub("", schema_id)
    if not text:
        return "Schema"
    if text[0].isdigit():
        text = f"Schema{text}"
    return text[0].upper() + text[1:]


__all__ = [
    "class_name",
    "method_name",
    "module_name",
    "pascal_case",
    "primary_name",
    "safe_identifier",
    "snake_case",
]
