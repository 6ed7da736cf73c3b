"""
Demo Text Transformation Engine

Local, deterministic stand-in for a remote language model. Each operation is a
fixed, ordered table of regular-expression substitutions (or a sentence slice
for summaries), so the assistant can be used without any API key.
"""

import re
from typing import Any, Callable, Dict, List, Mapping, Optional, Pattern, Tuple

from .operations import Operation, SummaryLength

Substitution = Tuple[Pattern[str], str]


def _word(word: str, flags: int = re.IGNORECASE | re.ASCII) -> Pattern[str]:
    """Compile a whole-word (or whole-phrase) pattern."""
    return re.compile(rf"\b{word}\b", flags)


# Word classes are ASCII-only; non-ASCII letters never count as word characters.
# Order matters: each substitution sees the output of the previous ones.
GRAMMAR_SUBSTITUTIONS: List[Substitution] = [
    (_word("i", flags=re.ASCII), "I"),
    (_word("dont"), "don't"),
    (_word("cant"), "can't"),
    (_word("wont"), "won't"),
    (_word("im"), "I'm"),
    (_word("ive"), "I've"),
    (_word("thier"), "their"),
    (_word("teh"), "the"),
    (_word("recieve"), "receive"),
    (_word("occured"), "occurred"),
    (_word("seperately"), "separately"),
]

IMPROVE_SUBSTITUTIONS: List[Substitution] = [
    (_word("good"), "excellent"),
    (_word("bad"), "suboptimal"),
    (_word("very"), "highly"),
    (_word("get"), "obtain"),
    (_word("big"), "significant"),
    (_word("small"), "minimal"),
    (_word("help"), "assist"),
    (_word("use"), "utilize"),
    (_word("make"), "create"),
    (_word("show"), "demonstrate"),
]

SHORTEN_SUBSTITUTIONS: List[Substitution] = [
    (_word("(very|really|actually|basically|literally|just|quite|rather|somewhat)"), ""),
    (_word("(in order to)"), "to"),
    (_word("(due to the fact that)"), "because"),
    (_word("(at this point in time)"), "now"),
    (_word("(in the event that)"), "if"),
    (_word("(it is important to note that)"), ""),
]

_WHITESPACE = re.compile(r"\s+")
_SENTENCE_START = re.compile(r"(^\s*\w|[.!?]\s*\w)", re.ASCII)
_SENTENCE = re.compile(r"[^.!?]+[.!?]+")

SUMMARY_HEADER = "Summary:\n"
DEFAULT_SUMMARY_SENTENCES = 3
SUMMARY_SENTENCES: Dict[str, int] = {
    SummaryLength.SHORT.value: 2,
    SummaryLength.MEDIUM.value: DEFAULT_SUMMARY_SENTENCES,
    SummaryLength.DETAILED.value: 5,
}


def _apply(text: str, substitutions: List[Substitution]) -> str:
    for pattern, replacement in substitutions:
        text = pattern.sub(replacement, text)
    return text


def _collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def fix_grammar(text: str) -> str:
    """
    Fix a handful of common typos and missing apostrophes, then capitalize
    the first letter of the text and of every sentence.

    Capitalization is a single pass over one combined pattern, so a run of
    terminal punctuation such as "?!" only capitalizes the next word once.
    """
    result = _collapse_whitespace(_apply(text, GRAMMAR_SUBSTITUTIONS))
    return _SENTENCE_START.sub(lambda match: match.group(0).upper(), result)


def improve_writing(text: str) -> str:
    """Swap plain words for more formal ones. Whitespace is left untouched."""
    return _apply(text, IMPROVE_SUBSTITUTIONS)


def split_sentences(text: str) -> List[str]:
    """
    Split text greedily into sentences ending in ``.``, ``!`` or ``?``.

    Text without any terminal punctuation is a single sentence. Trailing text
    after the last terminal mark is not part of any sentence.
    """
    return _SENTENCE.findall(text) or [text]


def summarize(text: str, length: Optional[Any] = None) -> str:
    """Keep the leading sentences of the text; how many depends on ``length``."""
    sentences = split_sentences(text)
    if isinstance(length, SummaryLength):
        length = length.value
    try:
        wanted = SUMMARY_SENTENCES.get(length, DEFAULT_SUMMARY_SENTENCES)
    except TypeError:
        wanted = DEFAULT_SUMMARY_SENTENCES
    selected = sentences[:min(wanted, len(sentences))]
    return f"{SUMMARY_HEADER}{' '.join(selected).strip()}"


def shorten(text: str) -> str:
    """Drop filler words and replace wordy phrases with shorter ones."""
    return _collapse_whitespace(_apply(text, SHORTEN_SUBSTITUTIONS))


_TRANSFORMS: Dict[str, Callable[[str, Mapping[str, Any]], str]] = {
    Operation.GRAMMAR.value: lambda text, options: fix_grammar(text),
    Operation.IMPROVE.value: lambda text, options: improve_writing(text),
    Operation.SUMMARIZE.value: lambda text, options: summarize(text, options.get("length")),
    Operation.SHORTEN.value: lambda text, options: shorten(text),
}


def transform(
    text: str,
    operation: Any,
    options: Optional[Mapping[str, Any]] = None
) -> str:
    """
    Run one demo operation over ``text``.

    Args:
        text: Text to transform, already validated by the caller
        operation: An ``Operation`` or its string value
        options: Optional settings; only ``length`` is used, by summarize

    Returns:
        The transformed text, or ``text`` unchanged for an unknown operation
    """
    if isinstance(operation, Operation):
        operation = operation.value
    handler = _TRANSFORMS.get(operation) if isinstance(operation, str) else None
    if handler is None:
        return text
    return handler(text, options or {})
