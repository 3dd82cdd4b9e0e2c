"""
Message adapter.

Converts stored plain-string message histories into LangChain chat
messages and flattens model replies back into plain text.

Dependencies: langchain_core
System role: Translation between stored history and the chat model API
"""

from typing import Sequence

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage


def to_chat_messages(
    messages: Sequence[str],
    system_prompt: str | None = None,
) -> list[BaseMessage]:
    """
    Convert a stored history into role-tagged chat turns.

    Storage keeps no author per entry, so every entry (including earlier
    replies) is sent as a user turn.

    Args:
        messages: Ordered message strings
        system_prompt: Optional instruction prepended as a system turn

    Returns:
        list[BaseMessage]: SystemMessage (optional) followed by one
        HumanMessage per entry, in order
    """
    converted: list[BaseMessage] = []
    if system_prompt:
        converted.append(SystemMessage(content=system_prompt))
    converted.extend(HumanMessage(content=text) for text in messages)
    return converted


def stringify_content(message: BaseMessage) -> str:
    """Extract textual content from a chat model reply."""
    content = message.content
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: list[str] = []
        for chunk in content:
            if isinstance(chunk, dict):
                if chunk.get("type") == "text" and chunk.get("text"):
                    parts.append(chunk["text"])
            elif isinstance(chunk, str):
                parts.append(chunk)
        return "\n".join(parts)
    return str(content)
