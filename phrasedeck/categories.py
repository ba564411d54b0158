"""Initial category assignment for cards imported without a category."""

W_FRAGEN = frozenset({
    "was", "wer", "wo", "wann", "wie", "warum", "woher", "wohin",
    "welcher", "wie viel", "wie viele",
})

PRONOUNS = frozenset({
    "ich", "du", "er", "sie", "es", "wir", "ihr",
    "mich", "dich", "ihn", "mir", "dir", "ihm", "ihnen",
    "mein", "dein", "sein",
})

DEFAULT_CATEGORY = "general"


def assign_initial_category(learning_text: str) -> str:
    """Guess a category id from a card's learning-language text.

    Question words go to "w-fragen", pronouns to "pronouns" and everything
    else to "general".
    """
    # Formal "Sie" is checked before lowercasing would fold it into "sie"
    if learning_text.strip() == "Sie":
        return "pronouns"

    normalized = learning_text.lower().replace("?", "").strip()
    if normalized in W_FRAGEN:
        return "w-fragen"
    if normalized in PRONOUNS:
        return "pronouns"
    return DEFAULT_CATEGORY
