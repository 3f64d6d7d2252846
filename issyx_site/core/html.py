"""
HTML escaping for user-supplied values placed into notification emails.
"""

# Order matters: "&" goes first so the entities produced below are not escaped again.
_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(value: str) -> str:
    """Escape a string for safe embedding in an HTML email body"""
    for char, entity in _REPLACEMENTS:
        value = value.replace(char, entity)
    return value
