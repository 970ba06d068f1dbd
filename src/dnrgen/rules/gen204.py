"""Block rules for Google's ``gen_204`` telemetry beacons."""

from __future__ import annotations

from collections.abc import Sequence

from dnrgen.constants.rules import ACTION_BLOCK, GEN204_URL_FILTER_TEMPLATE, RESOURCE_PING
from dnrgen.model import Rule, RuleAction, RuleCondition
from dnrgen.priorities import DEFAULT_PRIORITY_TIERS, PriorityTiers


def build_gen204_block_rules(
    hosts: Sequence[str],
    priorities: PriorityTiers = DEFAULT_PRIORITY_TIERS,
) -> tuple[Rule, ...]:
    """Return one ping block rule per host, ids 1..N in host order."""
    return tuple(
        Rule(
            id=rule_id,
            priority=priorities.block,
            action=RuleAction(type=ACTION_BLOCK),
            condition=RuleCondition(
                resource_types=(RESOURCE_PING,),
                url_filter=GEN204_URL_FILTER_TEMPLATE.format(host=host),
            ),
        )
        for rule_id, host in enumerate(hosts, 1)
    )
