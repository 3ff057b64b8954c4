"""Various data about shorthand CSS properties and their longhands."""

SIDES = ('top', 'right', 'bottom', 'left')

# Box-model shorthands, longhands are in top, right, bottom, left order.
DIMENSIONS = (
    ('margin', tuple(f'margin-{side}' for side in SIDES)),
    ('padding', tuple(f'padding-{side}' for side in SIDES)),
    ('border-color', tuple(f'border-{side}-color' for side in SIDES)),
    ('border-style', tuple(f'border-{side}-style' for side in SIDES)),
    ('border-width', tuple(f'border-{side}-width' for side in SIDES)),
)

# Other tables give the order used when longhands are folded back.
BACKGROUND_PROPERTIES = (
    'background-color', 'background-image', 'background-repeat',
    'background-position', 'background-size', 'background-attachment')
LIST_STYLE_PROPERTIES = (
    'list-style-type', 'list-style-position', 'list-style-image')
FONT_STYLE_PROPERTIES = (
    'font-style', 'font-variant', 'font-weight', 'font-size', 'line-height',
    'font-family')
BORDER_STYLE_PROPERTIES = ('border-width', 'border-style', 'border-color')
# "border" must come first, its longhands are themselves box shorthands.
BORDER_PROPERTIES = (
    'border', 'border-left', 'border-right', 'border-top', 'border-bottom')

NUMBER_OF_DIMENSIONS = 4

# Keywords valid for every property.
CSS_WIDE_KEYWORDS = frozenset(('inherit', 'initial', 'unset'))

# Font: https://www.w3.org/TR/CSS21/fonts.html#font-shorthand
FONT_STYLES = frozenset(('normal', 'italic', 'oblique'))
FONT_VARIANTS = frozenset(('normal', 'small-caps'))
FONT_WEIGHTS = frozenset(('normal', 'bold', 'bolder', 'lighter'))
FONT_NUMERIC_WEIGHTS = range(100, 901)
ABSOLUTE_SIZES = frozenset((
    'xx-small', 'x-small', 'small', 'medium', 'large', 'x-large', 'xx-large'))
RELATIVE_SIZES = frozenset(('smaller', 'larger'))
SYSTEM_FONTS = frozenset((
    'caption', 'icon', 'menu', 'message-box', 'small-caption', 'status-bar'))

BORDER_STYLES = (
    'none', 'hidden', 'dotted', 'dashed', 'solid', 'double', 'groove', 'ridge',
    'inset', 'outset')
BORDER_WIDTHS = ('thin', 'medium', 'thick')

LIST_STYLE_TYPES = (
    'disc', 'circle', 'square', 'decimal-leading-zero', 'decimal',
    'lower-roman', 'upper-roman', 'lower-greek', 'lower-alpha', 'lower-latin',
    'upper-alpha', 'upper-latin', 'hebrew', 'armenian', 'georgian',
    'cjk-ideographic', 'hiragana-iroha', 'hiragana', 'katakana-iroha',
    'katakana', 'none')
LIST_STYLE_POSITIONS = ('inside', 'outside')

BACKGROUND_ATTACHMENTS = ('scroll', 'fixed', 'local')
BACKGROUND_REPEATS = (
    'repeat-x', 'repeat-y', 'no-repeat', 'repeat', 'space', 'round')
BACKGROUND_POSITIONS = ('left', 'center', 'right', 'top', 'bottom')
BACKGROUND_SIZES = ('auto', 'cover', 'contain')

LENGTH_UNITS = (
    'em', 'ex', 'ch', 'rem', 'vw', 'vh', 'vmin', 'vmax', 'cm', 'mm', 'q',
    'in', 'pt', 'pc', 'px')
