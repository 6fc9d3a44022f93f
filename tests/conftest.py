"""Conformance fixture loader and shared fixtures for unless.

Loads YAML fixtures from tests/conformance/ and converts them to RuleSets
and HttpRequests for parametrized testing.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
import yaml

from unless import RuleSet, parse_rule_set
from unless.http import HttpRequest
from unless.testing import RecordingHandler, RecordingNext

CONFORMANCE_DIR = Path(__file__).resolve().parent / "conformance"


@dataclass
class FixtureCase:
    """A single test case from a conformance fixture."""

    fixture_name: str
    case_name: str
    rules: RuleSet
    request: HttpRequest
    expect: str


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_fixtures() -> list[FixtureCase]:
    """Load all conformance fixtures."""
    cases: list[FixtureCase] = []
    for yaml_file in sorted(CONFORMANCE_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[FixtureCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[FixtureCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            rules = parse_rule_set(doc["rules"])
            for case in doc["cases"]:
                cases.append(
                    FixtureCase(
                        fixture_name=doc["name"],
                        case_name=case["name"],
                        rules=rules,
                        request=_parse_request(case["request"]),
                        expect=case["expect"],
                    )
                )
    return cases


def _parse_request(data: dict[str, Any]) -> HttpRequest:
    """Parse a YAML request mapping into an HttpRequest."""
    original_url = data.get("original_url")
    return HttpRequest(
        method=str(data.get("method", "GET")),
        url=str(data.get("url", "/")),
        original_url=None if original_url is None else str(original_url),
    )


# ─── Shared fixtures ────────────────────────────────────────────────────────


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def next_() -> RecordingNext:
    return RecordingNext()
