"""
Class name transforms between CSS selector spelling and JS identifiers.

Each NameTransformMode is bound to exactly one pure string function through
the transformer table below.
"""

import logging
import re
from typing import Callable, Dict

from ..models.config import NameTransformMode

logger = logging.getLogger(__name__)

Transformer = Callable[[str], str]

TRANSFORMERS: Dict[NameTransformMode, Transformer] = {}

# Words for camelCase: acronyms, capitalised/lowercase runs, digit runs
_WORD_PATTERN = re.compile(r'[A-Z]{2,}(?=[A-Z][a-z]|[^A-Za-z]|$)|[A-Z]?[a-z]+|[A-Z]+|\d+')
_DASH_RUN_PATTERN = re.compile(r'-+(\w)')


def register_transformer(mode: NameTransformMode) -> Callable[[Transformer], Transformer]:
    """Bind a transform function to a mode"""
    def decorator(func: Transformer) -> Transformer:
        if mode in TRANSFORMERS:
            raise ValueError(f"Transformer for {mode.value} already registered")
        TRANSFORMERS[mode] = func
        return func
    return decorator


@register_transformer(NameTransformMode.IDENTITY)
def identity(raw: str) -> str:
    return raw


@register_transformer(NameTransformMode.CAMEL_CASE)
def camel_case(raw: str) -> str:
    """
    Convert a delimited class name to camelCase.

    Separators are stripped, the first word is lowercased and every following
    word is capitalised, e.g. ``btn-primary`` -> ``btnPrimary``,
    ``__foo_bar__`` -> ``fooBar``, ``HTMLParser`` -> ``htmlParser``.
    """
    words = _WORD_PATTERN.findall(raw)
    if not words:
        return raw

    head, *tail = words
    return head.lower() + ''.join(word[:1].upper() + word[1:].lower() for word in tail)


@register_transformer(NameTransformMode.DASHES)
def dashes_camel_case(raw: str) -> str:
    """Collapse hyphen runs, upper-casing the following character"""
    return _DASH_RUN_PATTERN.sub(lambda match: match.group(1).upper(), raw)


def get_transformer(mode: NameTransformMode) -> Transformer:
    try:
        return TRANSFORMERS[mode]
    except KeyError:
        raise ValueError(f"No transformer registered for {mode}") from None


def transform(raw: str, mode: NameTransformMode) -> str:
    """Map a raw CSS class name to the identifier exposed to source code"""
    return get_transformer(mode)(raw)
