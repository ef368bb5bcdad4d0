"""
Title Selector

First stage of a chat turn: show the model only the material titles and let
it name the ones relevant to the user's message.

Completion grammar (matched case-insensitively):

    "selected titles:" [ title { "," title } ]

Parsing is total. Any completion maps to a (possibly empty) list of titles:

    completion                              result
    --------------------------------------  ------------------
    "Selected titles: Lab1, Lab 2"          ["lab1", "lab 2"]
    "selected titles: "                     []
    "selected titles: lab1, , lab1"         ["lab1"]
    "Hello! How can I help?"                []   (no prefix)
    ""                                      []

Only the first line after the prefix is read. Titles containing commas
cannot be expressed in this grammar.
"""

import logging
import re

from app.services.chat.models import ConversationTurn
from app.services.chat.prompts import SELECTED_TITLES_PREFIX, build_selector_prompt
from app.services.llm.base import LLMProvider

logger = logging.getLogger(__name__)

SELECTED_TITLES_PATTERN = re.compile(re.escape(SELECTED_TITLES_PREFIX) + r"\s*(.*)")


def parse_selected_titles(completion: str | None) -> list[str]:
    """
    Extract the selected titles from a selector completion.

    Args:
        completion: Raw model output

    Returns:
        Lower-cased, whitespace-trimmed titles in the order given, without
        empty entries or repeats. Empty when the prefix is absent.
    """
    if not completion:
        return []

    match = SELECTED_TITLES_PATTERN.search(completion.lower())
    if not match:
        return []

    titles: list[str] = []
    for token in match.group(1).split(","):
        title = token.strip()
        if title and title not in titles:
            titles.append(title)
    return titles


class TitleSelector:
    """Asks a model which stored materials a message needs."""

    def __init__(
        self,
        provider: LLMProvider,
        model: str,
        history_turns: int = 0,
        max_output_tokens: int = 256,
    ):
        self.provider = provider
        self.model = model
        self.history_turns = history_turns
        self.max_output_tokens = max_output_tokens

    async def select(
        self,
        message: str,
        titles: list[str],
        history: list[ConversationTurn] | None = None,
    ) -> list[str]:
        """
        Run the selector model and parse its answer.

        Args:
            message: The current user message
            titles: Every available material title
            history: Prior conversation; only the last ``history_turns`` turns are sent

        Returns:
            Selected titles (see ``parse_selected_titles``)
        """
        messages: list[dict] = []
        if history and self.history_turns > 0:
            messages.extend(turn.model_dump() for turn in history[-self.history_turns:])
        messages.append({"role": "user", "content": message})

        completion = await self.provider.chat(
            system_prompt=build_selector_prompt(titles),
            messages=messages,
            model=self.model,
            max_output_tokens=self.max_output_tokens,
            temperature=0.0,
        )
        logger.debug("Selector completion: %r", completion)

        selected = parse_selected_titles(completion)
        logger.info("Selected titles: %s", selected)
        return selected
