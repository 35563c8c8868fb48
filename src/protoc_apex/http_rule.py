from __future__ import annotations

from typing import Tuple

from protoc_apex.errors import UnresolvedHttpRuleError
from protoc_apex.models import HttpRule

# Checked in this order; the first non-empty path wins.
VERB_PRECEDENCE: Tuple[str, ...] = ("GET", "POST", "PATCH", "PUT", "DELETE")


def resolve_http_rule(rule: HttpRule) -> Tuple[str, str]:
    """Return (verb, path template) for a google.api.http binding.

    Raises UnresolvedHttpRuleError when none of the supported verbs carries
    a path; a default verb is never guessed.
    """
    for verb in VERB_PRECEDENCE:
        path = getattr(rule, verb.lower())
        if path:
            return verb, path
    raise UnresolvedHttpRuleError(
        f"HTTP rule {rule} has no path for any of {', '.join(VERB_PRECEDENCE)}"
    )
