"""Greedy word wrapping for the drug pretty-printer."""


def wrap_text(text: str, max_line_width: int) -> list[str]:
    """Pack the words of ``text`` into lines of at most ``max_line_width`` characters.

    Words are separated by single spaces and are never split. The running
    count charges each placed word its length plus one trailing space; a
    word whose length would push the count past the width starts a new
    line. A word longer than the width sits alone on its own line.

    Args:
        text: Text to wrap. Runs of spaces are kept as empty words.
        max_line_width: Maximum characters per line, at least 1.

    Returns:
        The wrapped lines, without trailing spaces. An empty input gives [""].

    Raises:
        ValueError: If max_line_width is less than 1.
    """
    if max_line_width < 1:
        raise ValueError("max_line_width must be >= 1")

    lines: list[str] = []
    current: list[str] = []
    count = 0
    for word in text.split(" "):
        count += len(word)
        if count > max_line_width and current:
            lines.append(" ".join(current))
            current = []
            count = len(word)
        current.append(word)
        count += 1
    lines.append(" ".join(current))
    return lines


def wrap(text: str, max_line_width: int) -> str:
    """Return ``text`` wrapped by `wrap_text` and joined with newlines."""
    return "\n".join(wrap_text(text, max_line_width))
