"""
Regression tests for link field invariants and reference scenarios.
"""

from __future__ import annotations

import json

import pytest

from typedlink.components.link_field import normalize_link, serialize_link, validate_link
from typedlink.components.link_kinds import KindRegistry, allowed_kinds
from typedlink.domain.entities import LinkFieldConfig, LinkValue

RAW_INPUTS = [
    None,
    42,
    ["url"],
    "",
    "not json",
    "[1, 2, 3]",
    '"just a string"',
    json.dumps({"type": "url", "value": "https://example.com", "customText": "Click"}),
    json.dumps({"type": "nope", "value": "x", "extra": 1}),
    json.dumps({"value": "x"}),
    json.dumps({"type": 5, "value": "x"}),
    json.dumps({"type": "", "value": "x"}),
    pytest.param("[" * 200000, id="deeply-nested"),
    {"type": "url", "url": "https://example.com", "customText": "Go", "target": "1"},
    {"type": "email", "email": "a@b.co"},
    {"type": "missing", "missing": "x"},
    {"customText": "only text"},
    {"type": ["not", "hashable"]},
]


# --- Idempotence ---


@pytest.mark.parametrize("raw", RAW_INPUTS)
def test_normalize_is_idempotent(raw, config, fake_registry):
    once = normalize_link(raw, config, fake_registry)
    twice = normalize_link(once, config, fake_registry)
    assert twice == once


@pytest.mark.parametrize("raw", RAW_INPUTS)
def test_stored_payload_reproduces_link(raw, config, fake_registry):
    link = normalize_link(raw, config, fake_registry)
    assert normalize_link(serialize_link(link), config, fake_registry) == link


# --- Fail-closed ---


@pytest.mark.parametrize("raw", RAW_INPUTS)
def test_value_never_outlives_kind(raw, config, fake_registry):
    link = normalize_link(raw, config, fake_registry)
    if link.kind is None:
        assert link.value is None


@pytest.mark.parametrize("raw", RAW_INPUTS)
def test_disallowed_kind_never_survives(raw, fake_registry):
    config = LinkFieldConfig(allowed_kind_names=["email"])
    link = normalize_link(raw, config, fake_registry)

    if link.kind is not None:
        assert link.kind in allowed_kinds(config, fake_registry)
    else:
        assert link.value is None


def test_allowed_but_unregistered_kind_is_cleared(fake_registry):
    config = LinkFieldConfig(allowed_kind_names=["ghost"])
    link = normalize_link(json.dumps({"type": "ghost", "value": "x"}), config, fake_registry)

    assert link.kind is None
    assert link.value is None


# --- Wildcard ---


def test_wildcard_returns_whole_registry_in_order(fake_registry):
    config = LinkFieldConfig(allowed_kind_names="*")
    kinds = allowed_kinds(config, fake_registry)

    assert kinds == fake_registry.list_kinds()
    assert list(kinds) == ["url", "email", "custom"]


# --- Gating ---


@pytest.mark.parametrize(
    "raw",
    [
        json.dumps({"type": "url", "value": "https://example.com", "customText": "Sneaky"}),
        {"type": "url", "url": "https://example.com", "customText": "Sneaky"},
    ],
)
def test_custom_text_gated_by_field(raw, fake_registry):
    config = LinkFieldConfig(allow_custom_text=False, default_text="Default")
    link = normalize_link(raw, config, fake_registry)

    assert link.custom_text is None
    assert link.text == "Default"


@pytest.mark.parametrize(
    "raw",
    [
        json.dumps({"type": "url", "value": "https://example.com", "target": True}),
        {"type": "url", "url": "https://example.com", "target": "1"},
    ],
)
def test_target_gated_by_field(raw, fake_registry):
    closed = normalize_link(raw, LinkFieldConfig(allow_target=False), fake_registry)
    opened = normalize_link(raw, LinkFieldConfig(allow_target=True), fake_registry)

    assert closed.target is None
    assert opened.target is True


# --- Emptiness ---


@pytest.mark.parametrize(
    ("link", "empty"),
    [
        (LinkValue(), True),
        (LinkValue(kind="url"), True),
        (LinkValue(value="https://example.com"), True),
        (LinkValue(kind="url", value=""), True),
        (LinkValue(kind="url", value="https://example.com"), False),
    ],
)
def test_emptiness_law(link, empty, config, fake_registry):
    assert link.is_empty() is empty
    if empty:
        assert validate_link(link, config, fake_registry) == []


# --- Scenarios ---

SCENARIO_RAW = '{"type":"url","value":"https://example.com","customText":"Click"}'


def test_scenario_a_allowed_url(config, fake_registry):
    link = normalize_link(SCENARIO_RAW, config, fake_registry)

    assert link.kind == "url"
    assert link.value == "https://example.com"
    assert link.custom_text == "Click"
    assert link.target is None
    assert link.is_empty() is False
    assert validate_link(link, config, fake_registry) == []


def test_scenario_b_url_not_allowed(fake_registry):
    config = LinkFieldConfig(allow_custom_text=True, allowed_kind_names=["email"])
    link = normalize_link(SCENARIO_RAW, config, fake_registry)

    assert link.kind is None
    assert link.value is None
    assert link.custom_text == "Click"
    assert link.target is None


def test_scenario_c_unparseable_string(fake_registry):
    config = LinkFieldConfig(default_text="Read more")
    link = normalize_link("not json", config, fake_registry)

    assert link == LinkValue(default_text="Read more")
    assert link.custom_text is None
    assert link.text == "Read more"
    assert link.is_empty() is True
    assert validate_link(link, config, fake_registry) == []


def test_scenario_d_link_value_passes_through(config, fake_registry):
    existing = LinkValue(kind="custom", value="anything")
    assert normalize_link(existing, config, fake_registry) is existing


def test_scenario_e_invalid_value_reported(config, fake_registry):
    link = normalize_link({"type": "url", "url": "bad"}, config, fake_registry)

    assert link.kind == "url"
    assert link.value == "bad"

    errors = validate_link(link, config, fake_registry)
    assert [e.code for e in errors] == ["invalid_value"]


def test_registry_changes_are_observed(config, fake_registry):
    registry = KindRegistry()
    raw = json.dumps({"type": "late", "value": "x"})
    assert normalize_link(raw, config, registry).kind is None

    registry.register("late", fake_registry.get("custom"))
    assert normalize_link(raw, config, registry).kind == "late"
