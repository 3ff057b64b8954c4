"""Expand CSS shorthand properties and fold them back.

The public API is what is accessible from this "root" packages without
importing sub-modules.

"""

VERSION = __version__ = '1.0.0'

#: Default values for command-line and Python API serialization options.
#:
#: :param bool force_important:
#:     Whether all the serialized declarations are marked as ``!important``.
DEFAULT_OPTIONS = {
    'force_important': False,
}

__all__ = [
    'DEFAULT_OPTIONS', 'LOGGER', 'VERSION', 'Declaration', 'Declarations',
    'InvalidValues', 'RuleSet', '__version__', 'calculate_specificity']


# Import after setting the version, as the version is used in other modules
from .logger import LOGGER  # noqa: I001, E402
from .tokens import InvalidValues  # noqa: E402
from .declarations import Declaration, Declarations  # noqa: E402
from .rule_set import RuleSet, calculate_specificity  # noqa: E402
