import mistune

# Raw HTML in post bodies is passed through; authors are trusted.
_markdown = mistune.create_markdown(
    escape=False, plugins=["table", "strikethrough"]
)


def render_markdown(text: str) -> str:
    """Render a post body to HTML with table and strikethrough support."""
    return _markdown(text.strip())
