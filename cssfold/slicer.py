"""Slice components out of shorthand values.

A component is a pattern matching a whitespace-delimited part of a value,
with an optional validator. Components are tried in order, each one
removing the first accepted match from what remains of the value.

"""

import collections
import re

from tinycss2.color3 import parse_color

from .properties import (
    BACKGROUND_ATTACHMENTS, BACKGROUND_POSITIONS, BACKGROUND_REPEATS,
    BACKGROUND_SIZES, BORDER_STYLES, BORDER_WIDTHS, LENGTH_UNITS,
    LIST_STYLE_POSITIONS, LIST_STYLE_TYPES)

Component = collections.namedtuple(
    'Component', ('suffix', 'pattern', 'validator'), defaults=(None,))


def _keywords(keywords):
    return '|'.join(re.escape(keyword) for keyword in keywords)


def _pattern(body):
    """Compile ``body`` so that it only matches whole components."""
    return re.compile(rf'(?<!\S)(?:{body})(?!\S)', re.IGNORECASE)


def _is_color(text):
    return parse_color(text) is not None


NUMBER = r'[+-]?(?:\d*\.\d+|\d+)'
LENGTH = rf'{NUMBER}(?:{_keywords(LENGTH_UNITS)})|0'
LENGTH_OR_PERCENTAGE = rf'{NUMBER}%|{LENGTH}'
URL = r'''url\((?:\s*"[^"]*"\s*|\s*'[^']*'\s*|[^)]*)\)'''
GRADIENT = (
    r'(?:-[a-z]+-)?(?:repeating-)?(?:linear|radial|conic)-gradient'
    r'\((?:[^()]|\([^()]*\))*\)')
FUNCTION = r'[a-z-]+\((?:[^()]|\([^()]*\))*\)'

_repeat = _keywords(BACKGROUND_REPEATS)
_size = rf'{LENGTH_OR_PERCENTAGE}|{_keywords(BACKGROUND_SIZES)}'
_position = rf'{LENGTH_OR_PERCENTAGE}|{_keywords(BACKGROUND_POSITIONS)}'

IMAGE = _pattern(rf'{URL}|{GRADIENT}|none')
ATTACHMENT = _pattern(_keywords(BACKGROUND_ATTACHMENTS))
REPEAT = _pattern(rf'(?:{_repeat})(?:\s+(?:{_repeat}))?')
COLOR = _pattern(rf'{FUNCTION}|#[0-9a-f]+|[a-z]+')
# The leading slash is part of the match but not of the value.
SIZE = re.compile(
    rf'/\s*(?P<value>(?:{_size})(?:\s+(?:{_size}))?)(?!\S)', re.IGNORECASE)
POSITION = _pattern(rf'(?:{_position})(?:\s+(?:{_position})){{0,3}}')
BORDER_WIDTH = _pattern(rf'{LENGTH}|{_keywords(BORDER_WIDTHS)}')
BORDER_STYLE = _pattern(_keywords(BORDER_STYLES))
LIST_STYLE_TYPE = _pattern(_keywords(LIST_STYLE_TYPES))
LIST_STYLE_POSITION = _pattern(_keywords(LIST_STYLE_POSITIONS))
LIST_STYLE_IMAGE = _pattern(rf'{URL}|none')

BACKGROUND_COMPONENTS = (
    Component('-image', IMAGE),
    Component('-attachment', ATTACHMENT),
    Component('-repeat', REPEAT),
    Component('-color', COLOR, _is_color),
    Component('-size', SIZE),
    Component('-position', POSITION),
)
BORDER_COMPONENTS = (
    Component('-width', BORDER_WIDTH),
    Component('-color', COLOR, _is_color),
    Component('-style', BORDER_STYLE),
)
LIST_STYLE_COMPONENTS = (
    Component('-type', LIST_STYLE_TYPE),
    Component('-position', LIST_STYLE_POSITION),
    Component('-image', LIST_STYLE_IMAGE),
)


def slice_value(value, components):
    """Slice ``components`` out of ``value``.

    Return a ``(found, remaining)`` tuple, where ``found`` maps the suffix of
    each matched component to its text and ``remaining`` is what is left of
    ``value``. Components with no match are missing from ``found``.

    """
    found = {}
    for component in components:
        for match in component.pattern.finditer(value):
            text = match.groupdict().get('value') or match.group()
            if component.validator and not component.validator(text):
                continue
            found[component.suffix] = text.strip()
            value = f'{value[:match.start()]} {value[match.end():]}'
            break
    return found, ' '.join(value.split())
