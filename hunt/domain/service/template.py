"""Invitation message templates.

Templates use ``{{name}}`` placeholders. Rendering is plain substitution:
unknown or missing keys become the empty string, and no escaping is
applied.
"""

import re
from collections.abc import Mapping

PLACEHOLDER_PATTERN = re.compile(r"{{(.*?)}}")

INVITE_LINK_PLACEHOLDER = "inviteLink"

DEFAULT_SUBJECT_TEMPLATE = "Invitation: {{eventName}}"
DEFAULT_BODY_TEMPLATE = (
    "You have been invited to {{eventName}}.\n"
    "\n"
    "Event start: {{eventStart}}\n"
    "Event end: {{eventEnd}}\n"
    "\n"
    "Invitation link: {{inviteLink}}"
)

FALLBACK_LINK_LABEL = "Invitation link"


def render_template(template: str, context: Mapping[str, str | None]) -> str:
    """Substitute ``{{name}}`` placeholders from ``context``.

    Whitespace inside the braces is ignored. Substituted values are not
    scanned again.

    Args:
        template: Template text
        context: Placeholder values; None and missing keys render as ""

    Returns:
        Rendered text
    """

    def _substitute(match: re.Match[str]) -> str:
        value = context.get(match.group(1).strip())
        return value if value is not None else ""

    return PLACEHOLDER_PATTERN.sub(_substitute, template)


def has_placeholder(template: str, name: str) -> bool:
    """Whether ``template`` contains the ``{{name}}`` placeholder."""
    return any(
        match.group(1).strip() == name
        for match in PLACEHOLDER_PATTERN.finditer(template)
    )


def ensure_placeholder(body: str, name: str, fallback_link: str) -> str:
    """Guarantee that the rendered body will carry the link.

    Appends a line with the literal link unless the body already contains
    the ``{{name}}`` placeholder or the link itself. Applying it to its own
    output changes nothing.

    Args:
        body: Body template, possibly written by an operator
        name: Placeholder that renders to the link
        fallback_link: Literal link to append

    Returns:
        Body template that yields the link once rendered
    """
    if has_placeholder(body, name) or fallback_link in body:
        return body
    return f"{body}\n\n{FALLBACK_LINK_LABEL}: {fallback_link}"
