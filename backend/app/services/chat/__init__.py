"""
Course material chat

Answers course questions by:
1. Asking a model which stored materials (by title) a message needs
2. Accumulating those materials for the rest of the conversation
3. Injecting their full text into the system prompt of the final answer
"""

from app.services.chat.pipeline import ChatPipeline, get_chat_pipeline
from app.services.chat.title_selector import parse_selected_titles

__all__ = [
    "ChatPipeline",
    "get_chat_pipeline",
    "parse_selected_titles",
]
