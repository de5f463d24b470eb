"""Fallback answer builder - used when the remote model is unavailable."""

from backend.sidekick.docs.snippets import select_relevant_snippets
from backend.sidekick.models.docs import Document

BULLET = "•"


def build_fallback_answer(document: Document, question: str) -> str:
    """Render a snippet-based answer pulled directly from the document.

    Never fails for a stored document: empty text yields an apology
    naming the document instead of snippets.
    """
    text = document.text.strip()
    if not text:
        return (
            f'I received your question about "{document.name}", '
            "but I couldn't read any text from that upload yet."
        )

    snippets = select_relevant_snippets(text, question)
    intro = (
        "I could not reach the language model, so here is a quick summary "
        f'pulled directly from "{document.name}":'
    )
    bullets = [f"{BULLET} {snippet}" for snippet in snippets]
    return "\n".join([intro, *bullets])
