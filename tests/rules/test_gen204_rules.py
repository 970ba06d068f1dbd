"""Tests for gen_204 beacon block rules."""

from __future__ import annotations

from dnrgen.priorities import PriorityTiers
from dnrgen.rules import build_gen204_block_rules


def test_build_gen204_block_rules_one_per_host() -> None:
    hosts = ["www.google.com", "www.google.de", "www.google.co.jp"]

    rules = build_gen204_block_rules(hosts)

    assert len(rules) == len(hosts)
    assert [rule.id for rule in rules] == [1, 2, 3]
    assert all(rule.action.type == "block" for rule in rules)
    assert all(rule.priority == 1 for rule in rules)


def test_build_gen204_block_rules_condition() -> None:
    (rule,) = build_gen204_block_rules(["www.google.com"])

    assert rule.to_dict() == {
        "id": 1,
        "priority": 1,
        "action": {"type": "block"},
        "condition": {
            "resourceTypes": ["ping"],
            "urlFilter": "|https://www.google.com/gen_204^",
        },
    }


def test_build_gen204_block_rules_keeps_duplicates() -> None:
    rules = build_gen204_block_rules(["www.google.com", "www.google.com"])

    assert [rule.id for rule in rules] == [1, 2]
    assert rules[0].condition == rules[1].condition


def test_build_gen204_block_rules_empty_hosts() -> None:
    assert build_gen204_block_rules([]) == ()


def test_build_gen204_block_rules_uses_block_tier() -> None:
    rules = build_gen204_block_rules(["www.google.com"], PriorityTiers(block=3, dnt_check_allow=6))

    assert rules[0].priority == 3
