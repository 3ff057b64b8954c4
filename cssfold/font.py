"""Scanner for the ``font`` shorthand property.

See https://www.w3.org/TR/CSS21/fonts.html#font-shorthand

"""

import collections

from .properties import (
    ABSOLUTE_SIZES, FONT_NUMERIC_WEIGHTS, FONT_STYLES, FONT_VARIANTS,
    FONT_WEIGHTS, LENGTH_UNITS, RELATIVE_SIZES, SYSTEM_FONTS)
from .tokens import (
    InvalidValues, get_keyword, get_single_keyword, is_delimiter, parse_value,
    remove_whitespace, serialize)

FontValues = collections.namedtuple(
    'FontValues', ('style', 'variant', 'weight', 'size', 'line_height'),
    defaults=('normal',) * 5)


def is_font_style(token):
    return get_keyword(token) in FONT_STYLES


def is_font_variant(token):
    return get_keyword(token) in FONT_VARIANTS


def is_font_weight(token):
    if token.type == 'number':
        return token.is_integer and token.int_value in FONT_NUMERIC_WEIGHTS
    return get_keyword(token) in FONT_WEIGHTS


def is_length(token):
    if token.type == 'dimension':
        return token.lower_unit in LENGTH_UNITS
    elif token.type == 'number':
        # Unitless zero
        return token.value == 0
    return token.type == 'percentage'


def is_font_size(token):
    keyword = get_keyword(token)
    if keyword is not None:
        return (
            keyword in ABSOLUTE_SIZES or keyword in RELATIVE_SIZES or
            keyword == 'inherit')
    return is_length(token)


def is_line_height(token):
    if token.type == 'ident':
        return token.lower_value in ('normal', 'inherit')
    return token.type == 'number' or is_length(token)


class FontScanner:
    """One-way cursor over the tokens of a ``font`` value.

    Whitespace is skipped when looking for the next token, but kept in the
    token list so that the font family can be serialized verbatim.

    """
    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.position = 0

    def peek(self):
        """Return the next meaningful token, or ``None`` at the end."""
        while self.position < len(self.tokens):
            token = self.tokens[self.position]
            if token.type not in ('whitespace', 'comment'):
                return token
            self.position += 1

    def consume(self, predicate):
        """Consume and return the next token if it matches ``predicate``."""
        token = self.peek()
        if token is not None and predicate(token):
            self.position += 1
            return token

    def consume_rest(self):
        """Consume all the remaining tokens and return them serialized."""
        rest = serialize(self.tokens[self.position:])
        self.position = len(self.tokens)
        return rest

    def consume_style_variant_weight(self):
        """Consume one of the optional tokens before the font size.

        Return a ``(field, token)`` tuple, or ``None`` when the next token is
        not a style, a variant or a weight.

        """
        for field, predicate in (
                ('style', is_font_style),
                ('variant', is_font_variant),
                ('weight', is_font_weight)):
            token = self.consume(predicate)
            if token is not None:
                return field, token


def scan_font(value):
    """Split the value of a ``font`` shorthand.

    Return a ``(values, family)`` tuple, where ``values`` is a
    :class:`FontValues` and ``family`` is ``None`` when no font family is
    given. Return ``None`` for system fonts, that can't be split.

    """
    tokens = parse_value(value)
    if get_single_keyword(remove_whitespace(tokens)) in SYSTEM_FONTS:
        return None

    scanner = FontScanner(tokens)
    values = FontValues()
    # "normal" is matched as a style first, like any other shared keyword
    while (result := scanner.consume_style_variant_weight()) is not None:
        field, token = result
        values = values._replace(**{field: token.serialize()})

    token = scanner.consume(is_font_size)
    if token is None:
        raise InvalidValues(f'Expected a font size in {value!r}')
    values = values._replace(size=token.serialize())

    if scanner.consume(lambda token: is_delimiter(token, '/')) is not None:
        token = scanner.consume(is_line_height)
        if token is None:
            raise InvalidValues(f'Expected a line height after "/" in {value!r}')
        values = values._replace(line_height=token.serialize())

    family = scanner.consume_rest()
    return values, family or None
