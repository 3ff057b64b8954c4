"""Box-model dimensions.

Shorthands like ``margin`` set the four sides of a box with one to four
values, see https://www.w3.org/TR/CSS21/box.html#propdef-margin

"""

from .tokens import InvalidValues, split_on_whitespace


def expand_dimensions(value):
    """Return the ``(top, right, bottom, left)`` values set by ``value``."""
    values = split_on_whitespace(value)
    if len(values) == 1:
        values *= 4
    elif len(values) == 2:
        values *= 2  # (bottom, left) defaults to (top, right)
    elif len(values) == 3:
        values.append(values[1])  # left defaults to right
    elif len(values) != 4:
        raise InvalidValues(
            f'Cannot parse {value!r}, '
            f'expected 1 to 4 token components got {len(values)}')
    return tuple(values)


def minimal_dimensions(top, right, bottom, left):
    """Return the shortest list of values setting the four given sides."""
    if top == right == bottom == left:
        return [top]
    if left != right:
        return [top, right, bottom, left]
    if top == bottom:
        return [top, left]
    return [top, left, bottom]
