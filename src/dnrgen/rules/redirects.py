"""Rules that unwrap Google's ``/url`` outbound-link redirector."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import count

from dnrgen.constants.rules import (
    ACTION_ALLOW,
    ACTION_REDIRECT,
    REDIRECT_ENCODED_ALLOW_URL_FILTER_TEMPLATE,
    REDIRECT_QUERY_SHAPES,
    REDIRECT_REGEX_TEMPLATE,
    REDIRECT_SUBSTITUTION,
    RESOURCE_MAIN_FRAME,
)
from dnrgen.model import Redirect, Rule, RuleAction, RuleCondition
from dnrgen.priorities import DEFAULT_PRIORITY_TIERS, PriorityTiers


def redirect_regex_filter(host: str, shape: str) -> str:
    """Build the regexFilter capturing the destination URL for one query shape."""
    return REDIRECT_REGEX_TEMPLATE.format(host=host.replace("/", "\\/"), shape=shape)


def build_google_redirect_rules(
    hosts: Sequence[str],
    priorities: PriorityTiers = DEFAULT_PRIORITY_TIERS,
) -> tuple[Rule, ...]:
    """Return four redirect rules and one allow rule per host.

    Ids run on across hosts, so host ``i`` owns ids ``5*i + 1`` to ``5*i + 5``.
    The trailing allow rule outranks the redirects and lets percent-encoded
    destinations through unmodified.
    """
    rules: list[Rule] = []
    rule_ids = count(1)

    for host in hosts:
        for shape in REDIRECT_QUERY_SHAPES:
            rules.append(
                Rule(
                    id=next(rule_ids),
                    priority=priorities.redirect,
                    action=RuleAction(
                        type=ACTION_REDIRECT,
                        redirect=Redirect(regex_substitution=REDIRECT_SUBSTITUTION),
                    ),
                    condition=RuleCondition(
                        resource_types=(RESOURCE_MAIN_FRAME,),
                        regex_filter=redirect_regex_filter(host, shape),
                    ),
                )
            )
        rules.append(
            Rule(
                id=next(rule_ids),
                priority=priorities.redirect_encoded_allow,
                action=RuleAction(type=ACTION_ALLOW),
                condition=RuleCondition(
                    resource_types=(RESOURCE_MAIN_FRAME,),
                    url_filter=REDIRECT_ENCODED_ALLOW_URL_FILTER_TEMPLATE.format(host=host),
                ),
            )
        )

    return tuple(rules)
