"""CSS tokens helpers.

Values are tokenized by tinycss2, function calls and blocks come as single
nested nodes so that top-level splitting never breaks their arguments.

"""

import tinycss2


class InvalidValues(ValueError):  # noqa: N818
    """Invalid or unsupported value for a known CSS shorthand property."""


def parse_value(value):
    """Tokenize a declaration value string, comments are dropped."""
    return tinycss2.parse_component_value_list(value, skip_comments=True)


def remove_whitespace(tokens):
    """Remove any top-level whitespace and comments in a token list."""
    return tuple(
        token for token in tokens
        if token.type not in ('whitespace', 'comment'))


def split_on_whitespace(value):
    """Split a value string on top-level whitespace.

    Return a list of serialized components. Whitespace inside functions,
    like in ``rgb(0, 0, 0)``, is not a splitting point.

    """
    parts = [[]]
    for token in parse_value(value):
        if token.type == 'whitespace':
            if parts[-1]:
                parts.append([])
        else:
            parts[-1].append(token)
    if not parts[-1]:
        parts.pop()
    return [tinycss2.serialize(part) for part in parts]


def is_single_value(value):
    """Return whether ``value`` has exactly one top-level component."""
    return len(split_on_whitespace(value)) == 1


def get_keyword(token):
    """If ``token`` is a keyword, return its lowercase name.

    Otherwise return ``None``.

    """
    if token.type == 'ident':
        return token.lower_value


def get_single_keyword(tokens):
    """If ``values`` is a 1-element list of keywords, return its name.

    Otherwise return ``None``.

    """
    if len(tokens) == 1:
        token = tokens[0]
        if token.type == 'ident':
            return token.lower_value


def is_delimiter(token, value):
    """Return whether ``token`` is the literal delimiter ``value``."""
    return token.type == 'literal' and token.value == value


def serialize(tokens):
    """Serialize a list of tokens back to CSS text, stripped."""
    return tinycss2.serialize(tokens).strip()
