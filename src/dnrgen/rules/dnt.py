"""Do Not Track / Global Privacy Control rules."""

from __future__ import annotations

from dnrgen.constants.rules import (
    ACTION_ALLOW,
    ACTION_MODIFY_HEADERS,
    DNT_HEADER_NAME,
    DNT_POLICY_URL_FILTER,
    GPC_HEADER_NAME,
    PRIVACY_SIGNAL_VALUE,
    RESOURCE_MAIN_FRAME,
    RESOURCE_XMLHTTPREQUEST,
)
from dnrgen.model import HeaderOperation, Rule, RuleAction, RuleCondition
from dnrgen.priorities import DEFAULT_PRIORITY_TIERS, PriorityTiers


def build_dnt_policy_rule(priorities: PriorityTiers = DEFAULT_PRIORITY_TIERS) -> tuple[Rule, ...]:
    """Allow DNT policy check requests even when their domains are otherwise blocked."""
    return (
        Rule(
            id=1,
            priority=priorities.dnt_check_allow,
            action=RuleAction(type=ACTION_ALLOW),
            condition=RuleCondition(
                resource_types=(RESOURCE_XMLHTTPREQUEST,),
                url_filter=DNT_POLICY_URL_FILTER,
            ),
        ),
    )


def _privacy_signal_action() -> RuleAction:
    return RuleAction(
        type=ACTION_MODIFY_HEADERS,
        request_headers=(
            HeaderOperation(header=DNT_HEADER_NAME, value=PRIVACY_SIGNAL_VALUE),
            HeaderOperation(header=GPC_HEADER_NAME, value=PRIVACY_SIGNAL_VALUE),
        ),
    )


def build_dnt_signal_rules(priorities: PriorityTiers = DEFAULT_PRIORITY_TIERS) -> tuple[Rule, ...]:
    """Set ``DNT: 1`` and ``Sec-GPC: 1`` on outgoing requests.

    The first rule covers top-level documents, the second every other
    resource type (an empty condition matches all requests).
    """
    return (
        Rule(
            id=1,
            priority=priorities.dnt_header,
            action=_privacy_signal_action(),
            condition=RuleCondition(resource_types=(RESOURCE_MAIN_FRAME,)),
        ),
        Rule(
            id=2,
            priority=priorities.dnt_header,
            action=_privacy_signal_action(),
            condition=RuleCondition(),
        ),
    )
