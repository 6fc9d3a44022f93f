"""unless: skip a request handler when a request matches a rule set.

All public types are exported from this module for flat imports:

    from unless import wrap, unless, RuleSet, LiteralPath, PathPattern
"""

__version__ = "0.1.0"

# Config, see unless._config for the accepted option shapes
from unless._config import (
    ConfigParseError,
    Options,
    normalize_options,
    parse_rule_set,
)

# Matchers
from unless._matchers import (
    matches_custom,
    matches_extension,
    matches_method,
    matches_path,
)

# Rules
from unless._rules import (
    LiteralPath,
    NestedRule,
    PathPattern,
    PathRule,
    RuleSet,
)

# String matchers
from unless._string_matchers import (
    ExactMatcher,
    MatcherError,
    RegexMatcher,
    SuffixMatcher,
)
from unless._types import Handler, MatchingData, Next, RequestContext

# Decision
from unless._unless import should_skip, unless, wrap

__all__ = [
    # Protocols
    "Handler",
    "MatchingData",
    "Next",
    "RequestContext",
    # Decision
    "should_skip",
    "unless",
    "wrap",
    # Rules
    "LiteralPath",
    "NestedRule",
    "PathPattern",
    "PathRule",
    "RuleSet",
    # Matchers
    "matches_custom",
    "matches_extension",
    "matches_method",
    "matches_path",
    # String matchers
    "ExactMatcher",
    "MatcherError",
    "RegexMatcher",
    "SuffixMatcher",
    # Config
    "ConfigParseError",
    "Options",
    "normalize_options",
    "parse_rule_set",
]
