"""Rule builders for each generated rule set."""

from __future__ import annotations

from dnrgen.rules.checks import check_rule_list
from dnrgen.rules.dnt import build_dnt_policy_rule, build_dnt_signal_rules
from dnrgen.rules.gen204 import build_gen204_block_rules
from dnrgen.rules.redirects import build_google_redirect_rules

__all__ = [
    "build_dnt_policy_rule",
    "build_dnt_signal_rules",
    "build_gen204_block_rules",
    "build_google_redirect_rules",
    "check_rule_list",
]
