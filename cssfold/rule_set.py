"""CSS rule sets: selectors with a block of declarations."""

import tinycss2
from cssselect2 import SelectorError, compile_selector_list

from . import contractors
from .declarations import Declarations
from .expanders import expand_declaration
from .logger import LOGGER
from .properties import BORDER_PROPERTIES, DIMENSIONS, LIST_STYLE_PROPERTIES
from .tokens import serialize


def calculate_specificity(selector):
    """Return the specificity of ``selector`` as an integer.

    The ``(ids, classes, elements)`` specificity given by cssselect2 is
    folded into ``ids * 100 + classes * 10 + elements``. Invalid selectors
    have a specificity of 0.

    """
    try:
        compiled = compile_selector_list(selector)
    except SelectorError as exception:
        LOGGER.warning(
            'Invalid or unsupported selector %r, %s.', selector, exception)
        return 0
    if not compiled:
        return 0
    ids, classes, elements = max(
        compiled_selector.specificity for compiled_selector in compiled)
    return ids * 100 + classes * 10 + elements


def parse_selectors(selectors):
    """Split comma-separated ``selectors``.

    Commas inside functional pseudo-classes like ``:not(a, b)`` are not
    handled.

    """
    selectors = (' '.join(selector.split()) for selector in selectors.split(','))
    return [selector for selector in selectors if selector]


def parse_declarations(block):
    """Return :class:`Declarations` for ``block``.

    ``block`` can be ``None``, :class:`Declarations` (that is used as is), or
    a string of declarations. Invalid declarations are logged and ignored.

    """
    if block is None:
        return Declarations()
    elif isinstance(block, Declarations):
        return block
    elif not isinstance(block, str):
        raise TypeError(
            'Expected None, Declarations or string, '
            f'got {type(block).__name__}')

    declarations = Declarations()
    for declaration in tinycss2.parse_blocks_contents(
            block, skip_comments=True, skip_whitespace=True):
        if declaration.type == 'error':
            LOGGER.warning(
                'Error: %s at %d:%d.', declaration.message,
                declaration.source_line, declaration.source_column)
        elif declaration.type == 'declaration':
            declarations.add_declaration(
                declaration.name, serialize(declaration.value),
                declaration.important)
        else:
            LOGGER.warning(
                'Ignored nested rule at %d:%d, only declarations are allowed.',
                declaration.source_line, declaration.source_column)
    return declarations


class RuleSet:
    """A list of selectors sharing a block of declarations.

    :param str selectors:
        Comma-separated selectors.
    :type block: :class:`Declarations` or str
    :param block:
        The declarations, given as a store that is used as is, or as a
        string like ``'margin: 0; color: red !important'``.
    :param offset:
        Position of the rule in its source, for example a ``range``.
    :param str filename:
        Name of the source, required when ``offset`` is given.
    :param int specificity:
        Specificity used for all the selectors. Computed for each selector
        from its text when not given.

    """
    def __init__(self, selectors=None, block=None, offset=None, filename=None,
                 specificity=None):
        if (offset is None) != (filename is None):
            raise TypeError(
                'Require both offset and filename or no offset and no filename')
        self.offset = offset
        self.filename = filename
        self.specificity = specificity
        self.selectors = parse_selectors(selectors) if selectors else []
        self.declarations = parse_declarations(block)

    def get_value(self, name):
        """Return the value of ``name`` followed by ``;``, or ``''``."""
        declaration = self.declarations.get(name)
        if declaration is None:
            return ''
        return f'{declaration};'

    __getitem__ = get_value

    def add_declaration(self, name, value, important=False):
        self.declarations.add_declaration(name, value, important)

    __setitem__ = add_declaration

    def delete(self, name):
        self.declarations.delete(name)

    remove_declaration = delete

    def each_selector(self, force_important=False):
        """Yield ``(selector, declarations, specificity)`` tuples."""
        declarations = self.declarations_to_s(force_important)
        for selector in self.selectors:
            if self.specificity is None:
                specificity = calculate_specificity(selector)
            else:
                specificity = self.specificity
            yield selector, declarations, specificity

    def each_declaration(self):
        """Yield ``(name, value, important)`` tuples in declaration order."""
        for name, declaration in self.declarations.items():
            yield name, declaration.value, declaration.important

    def declarations_to_s(self, force_important=False):
        return self.declarations.to_s(force_important)

    def __str__(self):
        return f'{",".join(self.selectors)} {{ {self.declarations} }}'

    def __repr__(self):
        return f'<{type(self).__name__} {self}>'

    def expand_shorthand(self):
        """Split shorthand declarations into their longhands.

        Raise :class:`tokens.InvalidValues` for values that can't be parsed,
        the declarations are then left unchanged.

        """
        with self.declarations.transaction():
            # Border must be expanded before dimensions
            self.expand_border_shorthand()
            self.expand_dimensions_shorthand()
            self.expand_font_shorthand()
            self.expand_background_shorthand()
            self.expand_list_style_shorthand()

    def expand_border_shorthand(self):
        """Split ``border`` and ``border-*`` into width, color and style."""
        with self.declarations.transaction():
            for name in BORDER_PROPERTIES:
                expand_declaration(self.declarations, name)

    def expand_dimensions_shorthand(self):
        """Split ``margin``, ``padding`` and border box shorthands.

        Raise :class:`tokens.InvalidValues` for values that can't be parsed,
        the declarations are then left unchanged.

        """
        with self.declarations.transaction():
            for name, _ in DIMENSIONS:
                expand_declaration(self.declarations, name)

    def expand_font_shorthand(self):
        expand_declaration(self.declarations, 'font')

    def expand_background_shorthand(self):
        expand_declaration(self.declarations, 'background')

    def expand_list_style_shorthand(self):
        expand_declaration(self.declarations, 'list-style')

    def create_shorthand(self):
        """Fold longhand declarations into shorthands when possible."""
        self.create_background_shorthand()
        self.create_dimensions_shorthand()
        # Border must be folded after dimensions
        self.create_border_shorthand()
        self.create_font_shorthand()
        self.create_list_style_shorthand()

    def create_shorthand_properties(self, properties, shorthand):
        contractors.create_shorthand_properties(
            self.declarations, properties, shorthand)

    def create_background_shorthand(self):
        contractors.create_background_shorthand(self.declarations)

    def create_dimensions_shorthand(self):
        contractors.create_dimensions_shorthand(self.declarations)

    def create_border_shorthand(self):
        contractors.create_border_shorthand(self.declarations)

    def create_font_shorthand(self):
        contractors.create_font_shorthand(self.declarations)

    def create_list_style_shorthand(self):
        self.create_shorthand_properties(LIST_STYLE_PROPERTIES, 'list-style')
