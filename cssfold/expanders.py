"""Expanders splitting shorthand properties into longhand properties."""

import functools

from .dimensions import expand_dimensions
from .font import scan_font
from .logger import LOGGER
from .properties import CSS_WIDE_KEYWORDS, DIMENSIONS
from .slicer import (
    BACKGROUND_COMPONENTS, BORDER_COMPONENTS, LIST_STYLE_COMPONENTS, slice_value)
from .tokens import get_single_keyword, parse_value, remove_whitespace

EXPANDERS = {}


def expander(property_name):
    """Decorator adding a function to the ``EXPANDERS``."""
    def expander_decorator(function):
        """Add ``function`` to the ``EXPANDERS``."""
        assert property_name not in EXPANDERS, property_name
        EXPANDERS[property_name] = function
        return function
    return expander_decorator


def _get_css_wide_keyword(value):
    keyword = get_single_keyword(remove_whitespace(parse_value(value)))
    if keyword in CSS_WIDE_KEYWORDS:
        return keyword


def generic_expander(*expanded_names):
    """Decorator helping expanders to handle CSS-wide keywords.

    Wrap an expander so that it does not have to handle the ``inherit``,
    ``initial`` and ``unset`` cases, and can just return a dict whose keys are
    name suffixes. Names not starting with ``-`` are not suffixes.

    The wrapped expander returns ``None`` when the value can't be split.

    """
    def generic_expander_decorator(wrapped):
        """Decorate the ``wrapped`` expander."""
        @functools.wraps(wrapped)
        def generic_expander_wrapper(value, name):
            """Wrap the expander."""
            if keyword := _get_css_wide_keyword(value):
                results = dict.fromkeys(expanded_names, keyword)
            else:
                results = wrapped(value, name)
                if results is None:
                    return None
                for new_name in results:
                    assert new_name in expanded_names, new_name

            longhands = {}
            for new_name in expanded_names:
                if new_name in results:
                    if new_name.startswith('-'):
                        # new_name is a suffix
                        actual_new_name = f'{name}{new_name}'
                    else:
                        actual_new_name = new_name
                    longhands[actual_new_name] = results[new_name]
            return longhands
        return generic_expander_wrapper
    return generic_expander_decorator


def _slice(value, name, components):
    found, remaining = slice_value(value, components)
    if remaining:
        LOGGER.warning(
            'Ignored `%s` in `%s: %s`, unknown component.',
            remaining, name, value)
    return found


@expander('border-color')
@expander('border-style')
@expander('border-width')
@expander('margin')
@expander('padding')
def expand_four_sides(value, name):
    """Expand properties setting a value for the four sides of a box."""
    if keyword := _get_css_wide_keyword(value):
        value = keyword
    return dict(zip(dict(DIMENSIONS)[name], expand_dimensions(value)))


@expander('border')
@expander('border-top')
@expander('border-right')
@expander('border-bottom')
@expander('border-left')
@generic_expander('-width', '-color', '-style')
def expand_border(value, name):
    """Expand the ``border`` and ``border-*`` shorthand properties.

    ``border`` is expanded into ``border-width``, ``border-color`` and
    ``border-style``, that are box shorthands themselves.

    See https://www.w3.org/TR/CSS21/box.html#propdef-border

    """
    return _slice(value, name, BORDER_COMPONENTS)


@expander('font')
@generic_expander(
    '-style', '-variant', '-weight', '-size', 'line-height',
    '-family')  # line-height is not a suffix
def expand_font(value, name):
    """Expand the ``font`` shorthand property.

    Style, variant and weight can be given in any order, and default to
    ``normal``. System fonts can't be split.

    See https://www.w3.org/TR/CSS21/fonts.html#font-shorthand

    """
    result = scan_font(value)
    if result is None:
        return None
    values, family = result
    results = {
        '-style': values.style,
        '-variant': values.variant,
        '-weight': values.weight,
        '-size': values.size,
        'line-height': values.line_height,
    }
    if family is not None:
        results['-family'] = family
    return results


@expander('background')
@generic_expander(
    '-color', '-image', '-repeat', '-position', '-size', '-attachment')
def expand_background(value, name):
    """Expand the ``background`` shorthand property.

    See https://www.w3.org/TR/CSS21/colors.html#propdef-background

    """
    return _slice(value, name, BACKGROUND_COMPONENTS)


@expander('list-style')
@generic_expander('-type', '-position', '-image')
def expand_list_style(value, name):
    """Expand the ``list-style`` shorthand property.

    See https://www.w3.org/TR/CSS21/generate.html#propdef-list-style

    """
    return _slice(value, name, LIST_STYLE_COMPONENTS)


def expand_declaration(declarations, name):
    """Replace the ``name`` shorthand in ``declarations`` by its longhands.

    Nothing is done when ``name`` is not declared. Longhands get the
    importance of the shorthand.

    Raise :class:`tokens.InvalidValues` when the value can't be parsed, the
    declarations are then left unchanged.

    """
    declaration = declarations.get(name)
    if declaration is None:
        return
    longhands = EXPANDERS[name](declaration.value, name)
    if longhands is None:
        LOGGER.debug(
            'Kept `%s: %s`, the value can’t be split.', name, declaration.value)
        return
    declarations.replace_declaration(name, longhands, preserve_importance=True)
