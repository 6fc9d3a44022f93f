"""Option normalization: caller configuration -> RuleSet.

Two entry points share one parser:
  options -> normalize_options() -> RuleSet     (callable, RuleSet or mapping)
  dict    -> parse_rule_set()    -> RuleSet     (JSON/YAML-shaped documents)

Mapping shape:

| Key                | Accepted values                                        |
|--------------------|--------------------------------------------------------|
| custom             | callable taking the request context                    |
| path               | entry or list of entries (see below)                   |
| ext                | str or list of str, e.g. ".css"                        |
| method             | str or list of str, e.g. "GET"                         |
| use_original_url   | bool, default True (alias: useOriginalUrl)             |

Path entries: str (literal), compiled regex, {"regex": "..."} (RE2; with
more keys such as "method" it is a nested rule on that pattern),
any other mapping or a RuleSet (nested rule), or a ready-made PathRule.
Entries of any other type are dropped: they could never match.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from collections.abc import Callable, Mapping
from typing import Any

import re2

from unless._rules import LiteralPath, NestedRule, PathPattern, PathRule, RuleSet

logger = logging.getLogger(__name__)

type Options = Callable[[Any], Any] | RuleSet | Mapping[str, Any]

_REGEX_TYPES = (re.Pattern, type(re2.compile("")))

_KNOWN_KEYS = frozenset({"custom", "path", "ext", "method", "use_original_url", "useOriginalUrl"})


class ConfigParseError(TypeError):
    """Error normalizing caller options into a RuleSet."""


def normalize_options(options: Options) -> RuleSet:
    """Normalize wrap-time options into the canonical RuleSet.

    A bare callable becomes ``RuleSet(custom=options)``. A RuleSet is used
    as is. A mapping is parsed field by field.

    Raises:
        ConfigParseError: If options is none of the above, or ``custom``
            is set to something that is not callable.
    """
    if isinstance(options, RuleSet):
        return options
    if isinstance(options, Mapping):
        return _parse_rule_set(options)
    if callable(options):
        return RuleSet(custom=options)
    msg = f"options must be a callable, RuleSet or mapping, got {type(options).__name__}"
    raise ConfigParseError(msg)


def parse_rule_set(data: Mapping[str, Any]) -> RuleSet:
    """Parse a JSON/YAML-shaped mapping into a RuleSet.

    Raises:
        ConfigParseError: If data is not a mapping.
    """
    if not isinstance(data, Mapping):
        msg = f"expected mapping, got {type(data).__name__}"
        raise ConfigParseError(msg)
    return _parse_rule_set(data)


def _parse_rule_set(data: Mapping[str, Any]) -> RuleSet:
    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        logger.debug("ignoring unknown rule keys: %s", sorted(unknown))

    custom = data.get("custom")
    if custom is not None and not callable(custom):
        msg = f"'custom' must be callable, got {type(custom).__name__}"
        raise ConfigParseError(msg)

    use_original_url = data.get("use_original_url")
    if use_original_url is None:
        use_original_url = data.get("useOriginalUrl")

    return RuleSet(
        custom=custom,
        path=_parse_path(data.get("path")),
        ext=_parse_names(data.get("ext"), "ext"),
        method=_parse_names(data.get("method"), "method"),
        use_original_url=True if use_original_url is None else bool(use_original_url),
    )


def _parse_path(value: Any) -> tuple[PathRule, ...] | None:
    if value is None:
        return None
    items = value if isinstance(value, list | tuple) else [value]
    rules = []
    for item in items:
        rule = _parse_path_rule(item)
        if rule is None:
            logger.debug("dropping path entry of type %s", type(item).__name__)
            continue
        rules.append(rule)
    return tuple(rules)


def _parse_path_rule(item: Any) -> PathRule | None:
    """Parse one path entry. Returns None for entries that can never match."""
    match item:
        case str():
            return LiteralPath(item)
        case LiteralPath() | PathPattern() | NestedRule():
            return item
        case RuleSet():
            return NestedRule(item)
        case _ if isinstance(item, _REGEX_TYPES):
            return PathPattern(item)
        case Mapping() if "regex" in item:
            return _parse_regex_entry(item)
        case Mapping():
            return NestedRule(_parse_rule_set(item))
    return None


def _parse_regex_entry(item: Mapping[str, Any]) -> PathRule | None:
    """Parse a ``{"regex": ...}`` entry.

    With only the ``regex`` key it is a plain pattern. Any other key makes it
    a nested rule whose path is that pattern, so ``{"regex": "^/admin",
    "method": "POST"}`` needs both the path and the method to match.

    Raises:
        ConfigParseError: If the entry sets both ``regex`` and ``path``.
    """
    pattern = item["regex"]
    if not isinstance(pattern, str):
        return None
    if len(item) == 1:
        return PathPattern(pattern)
    if "path" in item:
        msg = "path entry sets both 'regex' and 'path'"
        raise ConfigParseError(msg)
    rest = {k: v for k, v in item.items() if k != "regex"}
    rule = dataclasses.replace(_parse_rule_set(rest), path=(PathPattern(pattern),))
    return NestedRule(rule)


def _parse_names(value: Any, key: str) -> tuple[str, ...] | None:
    """Parse an ``ext``/``method`` value: a string or a list of strings."""
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, list | tuple):
        logger.debug("ignoring %r value of type %s", key, type(value).__name__)
        return ()
    names = tuple(v for v in value if isinstance(v, str))
    if len(names) != len(value):
        logger.debug("dropped %d non-string %r entries", len(value) - len(names), key)
    return names
