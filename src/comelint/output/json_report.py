"""JSON reporter for scripts and CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict

from comelint.results.models import ValidationOutcome


def to_dict(outcome: ValidationOutcome) -> Dict[str, Any]:
    """Convert a ValidationOutcome to a JSON-serialisable dict."""
    rejection = outcome.rejection
    return {
        "version": "1.0",
        "accepted": outcome.accepted,
        "rule": rejection.rule_id if rejection else None,
        "reason": rejection.reason if rejection else None,
        "message": rejection.message if rejection else None,
        "kind": rejection.kind.value if rejection else None,
    }


def render(outcome: ValidationOutcome) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(outcome), indent=2)
