def count_words(text: str) -> int:
    """Number of whitespace-separated tokens."""
    return len(text.split())


def count_characters(text: str) -> int:
    return len(text)
