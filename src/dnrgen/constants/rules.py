"""Rule templates: resource types, URL filters and header values."""

from __future__ import annotations

RESOURCE_MAIN_FRAME: str = "main_frame"
RESOURCE_XMLHTTPREQUEST: str = "xmlhttprequest"
RESOURCE_PING: str = "ping"

ACTION_ALLOW: str = "allow"
ACTION_BLOCK: str = "block"
ACTION_MODIFY_HEADERS: str = "modifyHeaders"
ACTION_REDIRECT: str = "redirect"

VALID_ACTION_TYPES: frozenset[str] = frozenset({ACTION_ALLOW, ACTION_BLOCK, ACTION_MODIFY_HEADERS, ACTION_REDIRECT})

HEADER_OPERATION_SET: str = "set"
DNT_HEADER_NAME: str = "DNT"
GPC_HEADER_NAME: str = "Sec-GPC"
PRIVACY_SIGNAL_VALUE: str = "1"

DNT_POLICY_URL_FILTER: str = "|https://*/.well-known/dnt-policy.txt|"

GEN204_URL_FILTER_TEMPLATE: str = "|https://{host}/gen_204^"

# Query shapes Google's /url redirector uses to carry the destination, longest first.
REDIRECT_QUERY_SHAPES: tuple[str, ...] = (".+&q", "q", ".+&url", "url")
REDIRECT_REGEX_TEMPLATE: str = r"^https://{host}/url\?{shape}=(https?://[^&]+).*$"
REDIRECT_SUBSTITUTION: str = r"\1"

# Percent-encoded destinations cannot be regex-matched by the engine
# (https://github.com/w3c/webextensions/issues/302).
REDIRECT_ENCODED_ALLOW_URL_FILTER_TEMPLATE: str = "|https://{host}/url?*%*|"

RULES_PER_REDIRECT_HOST: int = len(REDIRECT_QUERY_SHAPES) + 1
