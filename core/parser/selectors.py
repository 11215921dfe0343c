"""
Line-oriented class selector scanner for CSS/SCSS/LESS modules.

Finds class selector declarations without building a CSS AST. Only the
declaration lines matter:

    .container {            top-level selector
      &-child {             nested under .container -> container-child
      &--modifier,          nested, continued selector list
      &__element {          nested -> container__element
    }
    .red, .red-fg {         top-level; only the first token is surfaced

Nested selectors are expanded against the most recent top-level selector,
which is the single piece of state carried through a scan.
"""

import logging
import re
from typing import List, Optional, Tuple

from ..models.config import NameTransformMode
from ..models.entities import ClassSelector
from .transform import Transformer, get_transformer

logger = logging.getLogger(__name__)

# ".name" at the start of a line, opening a rule body or continuing a selector list
TOP_LEVEL_SELECTOR = re.compile(
    r'^(?P<marker>\.)(?P<name>[A-Za-z][\w-]*)(?:[^{]*\{.*|[^{]*,\s*)$'
)

# "&-name", "&--name", "&_name", "&__name", optionally indented
NESTED_SELECTOR = re.compile(
    r'^\s*(?P<marker>&)(?P<suffix>[-_]{1,2}[A-Za-z0-9][\w-]*)(?:[^{;]*\{.*|[^{;]*,\s*)$'
)

# Top-level line made only of a comma-joined class list
TOP_LEVEL_CLASS_LIST = re.compile(
    r'^(?P<classes>\.[A-Za-z][\w-]*(?:\s*,\s*\.[A-Za-z][\w-]*)*)\s*[{,]\s*$'
)
_CLASS_TOKEN = re.compile(r'\.([A-Za-z][\w-]*)')

# Identifier that looks camelCased: lowercase start, uppercase later
CAMEL_CASED_NAME = re.compile(r'^[a-z]+[A-Z]')
_SEGMENT_BOUNDARY = re.compile(r'(?=[A-Z][a-z])')


def is_selector_line(line: str) -> bool:
    """Check if a line declares a class selector"""
    return bool(TOP_LEVEL_SELECTOR.match(line) or NESTED_SELECTOR.match(line))


def _fold_line(
    parent: Optional[ClassSelector],
    line_number: int,
    line: str,
    transformer: Transformer
) -> Tuple[Optional[ClassSelector], Optional[ClassSelector]]:
    """
    One step of the selector scan.

    Returns the new last top-level selector and the selector declared on
    this line, if any. Transforms compose under nesting: a nested selector's
    transformed name is the transform of the parent's transformed name plus
    the suffix after the placeholder.
    """
    match = TOP_LEVEL_SELECTOR.match(line)
    if match:
        name = match.group('name')
        selector = ClassSelector(
            raw_name=name,
            transformed_name=transformer(name),
            line=line_number,
            column=match.start('marker')
        )
        return selector, selector

    match = NESTED_SELECTOR.match(line)
    if match and parent is not None:
        suffix = match.group('suffix')
        selector = ClassSelector(
            raw_name=parent.raw_name + suffix,
            transformed_name=transformer(parent.transformed_name + suffix),
            line=line_number,
            column=match.start('marker'),
            nested=True
        )
        return parent, selector

    return parent, None


def find_all_selectors(
    stylesheet_text: str,
    mode: NameTransformMode = NameTransformMode.IDENTITY
) -> List[ClassSelector]:
    """
    Extract every class selector declaration, in file order.

    Nested selectors that appear before any top-level selector have nothing
    to expand against and are skipped.
    """
    transformer = get_transformer(mode)
    selectors: List[ClassSelector] = []
    parent: Optional[ClassSelector] = None

    for line_number, line in enumerate(stylesheet_text.splitlines()):
        parent, selector = _fold_line(parent, line_number, line, transformer)
        if selector is not None:
            selectors.append(selector)

    logger.debug(f"Found {len(selectors)} class selectors")
    return selectors


def optional_selector_prefix(segments: List[str]) -> str:
    """
    Build a pattern that makes every ancestor segment optional.

    Used with the camelCase options, where the identifier does not reveal how
    deeply the rule was nested:

        ["container", "Child"]
            -> (container|&)[-_]{1,2}Child
        ["container", "Child", "Element"]
            -> ((container|&)[-_]{1,2})?(Child|&)[-_]{1,2}Element

    Only two nesting levels are known to behave; deeper BEM nesting is rare.
    """
    *ancestors, last = segments
    pattern = ''
    for segment in ancestors:
        if pattern:
            pattern = f'(?:{pattern})?'
        pattern = rf'{pattern}(?:{re.escape(segment)}|&)[-_]{{1,2}}'
    return pattern + re.escape(last)


def keyword_pattern(wanted: str, mode: NameTransformMode) -> 're.Pattern[str]':
    """Pattern locating `wanted` inside a selector declaration line"""
    literal = re.escape(wanted)
    if not mode.is_camel_case:
        alternatives = [literal]
    else:
        # A nested "&--name" may be what a flat camelCase identifier refers to
        alternatives = [rf'(?:&[-_]{{1,2}})?{literal}']
        if CAMEL_CASED_NAME.match(wanted):
            segments = _SEGMENT_BOUNDARY.split(wanted)
            alternatives.append(optional_selector_prefix(segments))

    return re.compile(
        rf'(?<![\w&-])(?:{"|".join(alternatives)})(?![\w-])',
        re.IGNORECASE
    )


def last_top_level_declaration(
    lines: List[str],
    wanted: str,
    mode: NameTransformMode
) -> int:
    """Index of the last line declaring `wanted` as a top-level class, or -1"""
    transformer = get_transformer(mode)
    last = -1
    for line_number, line in enumerate(lines):
        match = TOP_LEVEL_CLASS_LIST.match(line)
        if not match:
            continue
        names = _CLASS_TOKEN.findall(match.group('classes'))
        if any(name == wanted or transformer(name) == wanted for name in names):
            last = line_number
    return last


def find_selector(
    stylesheet_text: str,
    wanted_class_name: str,
    mode: NameTransformMode = NameTransformMode.IDENTITY
) -> Optional[ClassSelector]:
    """
    Find the declaration of a class name referenced from source code.

    Only selector declaration lines are candidates, so names inside property
    values or comments never match. With a camelCase mode, a nested match is
    passed over when a later line declares the same name as a top-level
    selector:

        .container {
          &--clear { ... }      styles.clear does not land here
        }
        .clear { ... }          but here
    """
    if not wanted_class_name:
        return None

    keyword = keyword_pattern(wanted_class_name, mode)
    transformer = get_transformer(mode)
    lines = stylesheet_text.splitlines()

    best_top_level = -1
    if mode.is_camel_case:
        best_top_level = last_top_level_declaration(lines, wanted_class_name, mode)

    parent: Optional[ClassSelector] = None
    for line_number, line in enumerate(lines):
        parent, declared = _fold_line(parent, line_number, line, transformer)

        nested = bool(NESTED_SELECTOR.match(line))
        if not nested and not TOP_LEVEL_SELECTOR.match(line):
            continue

        match = keyword.search(line)
        if not match:
            continue

        if nested and best_top_level > line_number:
            logger.debug(
                f"Skipping nested match for '{wanted_class_name}' on line {line_number}, "
                f"top-level declaration on line {best_top_level}"
            )
            continue

        if declared is not None and (declared.nested or match.start() == declared.column + 1):
            raw_name, transformed_name = declared.raw_name, declared.transformed_name
        else:
            # Matched a later token of a comma-joined list
            raw_name = match.group(0).lstrip('&-_')
            transformed_name = transformer(raw_name)

        return ClassSelector(
            raw_name=raw_name,
            transformed_name=transformed_name,
            line=line_number,
            column=match.start(),
            nested=nested
        )

    logger.debug(f"No selector declaration found for '{wanted_class_name}'")
    return None
