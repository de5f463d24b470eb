"""Snippet selector - keyword relevance filter over document paragraphs."""

import re

MAX_SNIPPETS = 3
MAX_SNIPPET_CHARS = 280
ELLIPSIS = "..."
MIN_KEYWORD_CHARS = 4

NO_PARSABLE_CONTENT = "(Document contains text but no parsable sentences.)"

_NEWLINES = re.compile(r"\n+")
_NON_WORD = re.compile(r"\W+")
_WHITESPACE = re.compile(r"\s+")


def split_paragraphs(text: str) -> list[str]:
    """Split text into paragraphs on any run of newlines.

    Carriage returns are dropped first, so "\\r\\n" behaves like "\\n".
    A document with one sentence per line yields one paragraph per line.

    Returns:
        Stripped, non-empty paragraphs in document order
    """
    normalized = text.replace("\r", "")
    return [p.strip() for p in _NEWLINES.split(normalized) if p.strip()]


def extract_keywords(question: str) -> list[str]:
    """Lower-cased question tokens longer than three characters.

    Short words ("the", "is", "what") fall out by length, not by a
    stop-word list.
    """
    tokens = _NON_WORD.split(question.lower())
    return [token for token in tokens if len(token) >= MIN_KEYWORD_CHARS]


def is_relevant(paragraph: str, keywords: list[str]) -> bool:
    """True if any keyword occurs as a substring of the paragraph.

    Substring, not whole-word: "cat" matches "category".
    """
    lower = paragraph.lower()
    return any(keyword in lower for keyword in keywords)


def truncate(snippet: str) -> str:
    """Collapse whitespace runs to single spaces and cap at 280 characters.

    Over-long snippets keep their first 277 characters followed by "...".
    """
    collapsed = _WHITESPACE.sub(" ", snippet)
    if len(collapsed) <= MAX_SNIPPET_CHARS:
        return collapsed
    return collapsed[: MAX_SNIPPET_CHARS - len(ELLIPSIS)] + ELLIPSIS


def select_relevant_snippets(text: str, question: str) -> list[str]:
    """Pick up to three paragraphs relevant to a question.

    Pure function with no I/O or hidden state.

    Args:
        text: Full document text
        question: Natural-language question

    Returns:
        Between one and three truncated snippets in document order.

    Strategy:
        1. Split into paragraphs on newlines
        2. No paragraphs -> single placeholder snippet
        3. Keep paragraphs containing any question keyword
        4. If none match (or the question has no keywords), keep all paragraphs
        5. First three of the selection, each truncated
    """
    paragraphs = split_paragraphs(text)
    if not paragraphs:
        return [NO_PARSABLE_CONTENT]

    keywords = extract_keywords(question)
    relevant = [p for p in paragraphs if is_relevant(p, keywords)]

    selections = relevant or paragraphs
    return [truncate(snippet) for snippet in selections[:MAX_SNIPPETS]]
