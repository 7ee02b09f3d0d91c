"""Shared markdown-it token utilities"""


def heading_level(token) -> int | None:
    """Return the heading level (1-6) for a heading_open token, else None."""
    if token.type == 'heading_open' and token.tag and token.tag[0] == 'h' and token.tag[1:].isdigit():
        return int(token.tag[1:])
    return None


def inline_text(token) -> str:
    """Flatten an inline token's children to the text a reader would see."""
    if not token.children:
        return token.content
    parts = []
    for child in token.children:
        if child.type in ('text', 'code_inline'):
            parts.append(child.content)
        elif child.type == 'softbreak':
            parts.append('\n')
    return ''.join(parts)
