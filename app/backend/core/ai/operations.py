"""
Writing Operations and Prompts

Defines the operations the assistant supports and the instructions sent to
remote language-model providers for each of them.
"""

from enum import Enum
from typing import Any, Dict, Mapping, Optional


class Operation(str, Enum):
    """A writing operation a client can request."""
    GRAMMAR = "grammar"
    IMPROVE = "improve"
    SUMMARIZE = "summarize"
    SHORTEN = "shorten"


class SummaryLength(str, Enum):
    """Requested summary length."""
    SHORT = "short"
    MEDIUM = "medium"
    DETAILED = "detailed"


SYSTEM_PROMPTS: Dict[Operation, str] = {
    Operation.GRAMMAR: """You are an expert grammar and spelling checker. Your task is to:
- Fix all spelling mistakes
- Correct grammar errors
- Improve sentence structure while maintaining the original meaning
- Return ONLY the corrected text, no explanations
- Preserve the original formatting (paragraphs, line breaks)""",

    Operation.IMPROVE: """You are a professional writing coach. Your task is to:
- Make the text clearer and more professional
- Use better word choices
- Improve flow and tone
- Maintain the original meaning and intent
- Return ONLY the improved text, no explanations""",

    Operation.SUMMARIZE: """You are an expert summarizer. Your task is to:
- Create a concise summary of the provided text
- Capture all key points and main ideas
- Return a well-structured summary (can use bullet points for longer texts)
- Keep it informative yet brief""",

    Operation.SHORTEN: """You are a concise writing expert. Your task is to:
- Reduce the length of the text significantly
- Keep the original meaning intact
- Remove redundancy and unnecessary words
- Make every word count
- Return ONLY the shortened text, no explanations""",
}

LENGTH_INSTRUCTIONS: Dict[SummaryLength, str] = {
    SummaryLength.SHORT: "Keep the summary very brief (2-3 sentences max).",
    SummaryLength.MEDIUM: "Provide a moderate-length summary (1 paragraph).",
    SummaryLength.DETAILED: "Provide a detailed summary with bullet points.",
}


def get_system_prompt(operation: Operation) -> str:
    return SYSTEM_PROMPTS[Operation(operation)]


def get_length_instruction(length: Any) -> str:
    """Instruction suffix for a summary length, empty if the length is unknown."""
    try:
        return LENGTH_INSTRUCTIONS[SummaryLength(length)]
    except ValueError:
        return ""


def build_user_prompt(
    text: str,
    operation: Operation,
    options: Optional[Mapping[str, Any]] = None
) -> str:
    """
    Build the user message for a remote provider.

    Only summaries with a requested length carry an extra instruction; every
    other request sends the raw text.
    """
    length = (options or {}).get("length")
    if Operation(operation) is not Operation.SUMMARIZE or not length:
        return text
    return f"{get_length_instruction(length)}\n\nText to summarize:\n{text}"
