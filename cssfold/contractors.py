"""Contractors folding longhand properties into shorthand properties.

Important declarations are never folded, as the ``!important`` flag of a
shorthand applies to all of its longhands.

"""

from .dimensions import minimal_dimensions
from .logger import LOGGER
from .properties import (
    BACKGROUND_PROPERTIES, BORDER_STYLE_PROPERTIES, CSS_WIDE_KEYWORDS,
    DIMENSIONS, FONT_STYLE_PROPERTIES, NUMBER_OF_DIMENSIONS)
from .tokens import is_single_value


def _get_css_wide_keyword(values):
    """Return the CSS-wide keyword shared by all ``values``, if any."""
    keywords = {value.lower() for value in values}
    if len(keywords) == 1 and keywords <= CSS_WIDE_KEYWORDS:
        return keywords.pop()


def _get_all(declarations, properties, shorthand):
    """Return the declarations of ``properties`` if they can be folded.

    Return ``None`` if a property is missing or important.

    """
    found = [declarations.get(name) for name in properties]
    if any(declaration is None for declaration in found):
        return None
    if any(declaration.important for declaration in found):
        LOGGER.debug(
            'Kept longhands of `%s`, some of them are important.', shorthand)
        return None
    return found


def _replace(declarations, properties, shorthand, value):
    for name in properties:
        declarations.delete(name)
    declarations[shorthand] = value


def create_shorthand_properties(declarations, properties, shorthand):
    """Fold the declared ``properties`` into ``shorthand``.

    Values of the properties that are declared and not important are joined
    in the order of ``properties``. Nothing is done if less than two values
    are found.

    """
    found = {}
    for name in properties:
        declaration = declarations.get(name)
        if declaration is None:
            continue
        if declaration.important:
            LOGGER.debug('Kept `%s` out of `%s`, it is important.', name, shorthand)
            continue
        found[name] = declaration.value

    if len(found) < 2:
        return

    if len(found) == len(properties):
        keyword = _get_css_wide_keyword(found.values())
    else:
        keyword = None
    _replace(declarations, found, shorthand, keyword or ' '.join(found.values()))


def create_background_shorthand(declarations):
    """Fold the ``background-*`` longhands into ``background``.

    In the shorthand, the size has to follow a position and a ``/``.

    """
    properties = BACKGROUND_PROPERTIES
    size = declarations.get('background-size')
    if size is not None and not size.important:
        position = declarations.get('background-position')
        if position is not None and position.important:
            LOGGER.debug(
                'Kept `background-size`, `background-position` is important.')
            properties = tuple(
                name for name in properties if name != 'background-size')
        else:
            if position is None:
                declarations['background-position'] = '0% 0%'
            if _get_css_wide_keyword([size.value]) is None:
                declarations['background-size'] = size._replace(
                    value=f'/ {size.value}')
    create_shorthand_properties(declarations, properties, 'background')


def create_dimensions_shorthand(declarations):
    """Fold the four sides of box longhands into their shorthands.

    The shortest form setting the same four values is used.

    """
    if len(declarations) < NUMBER_OF_DIMENSIONS:
        return

    for shorthand, longhands in DIMENSIONS:
        sides = _get_all(declarations, longhands, shorthand)
        if sides is None:
            continue
        values = minimal_dimensions(*(side.value for side in sides))
        _replace(declarations, longhands, shorthand, ' '.join(values))


def create_border_shorthand(declarations):
    """Fold ``border-width``, ``border-style`` and ``border-color``.

    Values set for different sides can't be folded into ``border``.

    """
    found = _get_all(declarations, BORDER_STYLE_PROPERTIES, 'border')
    if found is None:
        return
    values = [declaration.value for declaration in found]
    if not all(is_single_value(value) for value in values):
        return
    value = _get_css_wide_keyword(values) or ' '.join(values)
    _replace(declarations, BORDER_STYLE_PROPERTIES, 'border', value)


def create_font_shorthand(declarations):
    """Fold the font longhands into ``font``.

    All the font longhands have to be declared. ``normal`` values are
    omitted, but the size and the family are always given.

    """
    found = _get_all(declarations, FONT_STYLE_PROPERTIES, 'font')
    if found is None:
        return
    values = [declaration.value for declaration in found]
    style, variant, weight, size, line_height, family = values

    if keyword := _get_css_wide_keyword(values):
        value = keyword
    else:
        parts = [part for part in (style, variant, weight) if part != 'normal']
        if line_height == 'normal':
            parts.append(size)
        else:
            parts.append(f'{size}/{line_height}')
        parts.append(family)
        value = ' '.join(' '.join(parts).split())
    _replace(declarations, FONT_STYLE_PROPERTIES, 'font', value)
