"""Pure functions for building the human-facing messages of a run.

Placeholders look like ``%{identifier}``. For example::

    hydrate_template(
        "Today is %{today}, but tomorrow is the day after %{today}, which is %{tomorrow}.",
        {"today": "Tuesday", "tomorrow": "Wednesday"},
    )
    # -> "Today is Tuesday, but tomorrow is the day after Tuesday, which is Wednesday."
"""

import re
from collections.abc import Mapping
from typing import Any

PLACEHOLDER_PATTERN = re.compile(r"%\{([A-Za-z0-9_]+)\}")

FAILURE_MESSAGE_TEMPLATE = "You made meaningless changes to:\n%{filesAsMarkdownList}"


def hydrate_template(template: str, variables: Mapping[str, Any] | None = None) -> str:
    """Replace every known placeholder; unknown placeholders are kept verbatim."""
    variables = variables or {}

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in variables:
            return str(variables[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def build_failure_message(variables: Mapping[str, Any]) -> str:
    return hydrate_template(FAILURE_MESSAGE_TEMPLATE, variables)
