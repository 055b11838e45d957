"""Text helpers for chat markup."""

import re
from typing import Dict

# $NAME or ${NAME}
_VARIABLE_PATTERN = re.compile(r"\$([A-Za-z0-9_]+|\{[A-Za-z0-9_.]+\})")


def escape(text: str) -> str:
    """
    Escape text for chat markup.

    '&' is replaced first so the entities produced for '<' and '>' are not
    escaped a second time.
    """
    text = text.replace("&", "&amp;")
    text = text.replace("<", "&lt;")
    text = text.replace(">", "&gt;")
    return text


def expand_variables(template: str, variables: Dict[str, str]) -> str:
    """
    Expand $NAME and ${NAME} references in a template.

    Unknown variables are left as written.

    Args:
        template: Text containing variable references
        variables: Variable values by name

    Returns:
        Template with known variables substituted
    """
    def replace(match: re.Match) -> str:
        name = match.group(1)
        if name.startswith("{"):
            name = name[1:-1]
        value = variables.get(name)
        return match.group(0) if value is None else value

    return _VARIABLE_PATTERN.sub(replace, template)
