"""
Prompt templates for the two model calls of a chat turn.
"""

SELECTED_TITLES_PREFIX = "selected titles:"


def build_selector_prompt(titles: list[str]) -> str:
    """
    System prompt asking the model to pick relevant material titles.

    The model must answer on one line as ``selected titles: a, b``; an empty
    list after the prefix means no material is needed.
    """
    title_lines = "\n".join(titles)
    return (
        "You are a title selector. Here are the available material titles:\n"
        f"{title_lines}\n\n"
        "Based on the user's question with the context, select the relevant titles "
        "(you can select multiple) and respond with them on a single line in the format: "
        f'"{SELECTED_TITLES_PREFIX} Title1, Title2". '
        f'For example, "{SELECTED_TITLES_PREFIX} lab 3 overview".\n'
        "Important:\n"
        "- Select titles if the user's question is related to the titles\n"
        "- Copy each title exactly as written above\n"
        f'- For non-course related questions (greetings, small talk), respond with "{SELECTED_TITLES_PREFIX} "'
    )


def build_responder_prompt(context: str) -> str:
    """System prompt for the final answer, carrying the rendered context block."""
    return (
        "You are an educational assistant. "
        "Use the following context to answer the user's question:\n"
        f"{context}"
    )
