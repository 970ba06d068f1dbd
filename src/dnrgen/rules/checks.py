"""Structural checks applied to every rule list before it is written."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Sequence

from dnrgen.constants.rules import ACTION_MODIFY_HEADERS, ACTION_REDIRECT, VALID_ACTION_TYPES
from dnrgen.constants.validation import RULE001, RULE002, RULE003, RULE004, RULE005
from dnrgen.exceptions.validation import ValidationError
from dnrgen.model import Rule


def check_rule_list(name: str, rules: Sequence[Rule]) -> list[ValidationError]:
    """Return every structural problem found in one rule list."""
    errors: list[ValidationError] = []
    ids = [rule.id for rule in rules]

    for rule_id, occurrences in sorted(Counter(ids).items()):
        if occurrences > 1:
            errors.append(
                ValidationError(
                    code=RULE001,
                    path=name,
                    field=f"id={rule_id}",
                    message=f"rule id {rule_id} is used {occurrences} times",
                )
            )

    if ids and sorted(ids) != list(range(1, len(ids) + 1)) and len(set(ids)) == len(ids):
        errors.append(
            ValidationError(
                code=RULE003,
                path=name,
                field="id",
                message=f"rule ids must run from 1 to {len(ids)}",
            )
        )

    for rule in rules:
        errors.extend(_check_rule(name, rule))

    return errors


def _check_rule(name: str, rule: Rule) -> list[ValidationError]:
    errors: list[ValidationError] = []
    field = f"id={rule.id}"

    if rule.id <= 0 or rule.priority <= 0:
        errors.append(
            ValidationError(
                code=RULE002,
                path=name,
                field=field,
                message=f"id and priority must be positive (id={rule.id}, priority={rule.priority})",
            )
        )

    action = rule.action
    if action.type not in VALID_ACTION_TYPES:
        errors.append(
            ValidationError(
                code=RULE004,
                path=name,
                field=field,
                message=f"unknown action type {action.type!r}",
                hint=f"expected one of {sorted(VALID_ACTION_TYPES)}",
            )
        )
    elif action.type == ACTION_REDIRECT and action.redirect is None:
        errors.append(
            ValidationError(code=RULE004, path=name, field=field, message="redirect action has no substitution")
        )
    elif action.type == ACTION_MODIFY_HEADERS and not action.request_headers:
        errors.append(
            ValidationError(code=RULE004, path=name, field=field, message="modifyHeaders action sets no headers")
        )

    if rule.condition.regex_filter is not None:
        try:
            re.compile(rule.condition.regex_filter)
        except re.error as exc:
            errors.append(
                ValidationError(
                    code=RULE005,
                    path=name,
                    field=field,
                    message=f"invalid regexFilter: {exc}",
                )
            )

    return errors
