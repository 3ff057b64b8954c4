"""Ordered store of CSS declarations."""

import collections
import contextlib
import re

IMPORTANT = re.compile(r'\s*!\s*important\b\s*', re.IGNORECASE)
TRAILING_SEMICOLON = re.compile(r'\s*;\s*$')


class Declaration(collections.namedtuple('Declaration', 'value, important')):
    """Value of a declaration, with its ``!important`` flag."""
    __slots__ = ()

    def __str__(self):
        return f'{self.value} !important' if self.important else self.value


class Declarations:
    """Ordered mapping of property names to :class:`Declaration` objects.

    There is only one declaration per property: setting a property that
    already exists replaces its value but keeps its position. The insertion
    order is the serialization order.

    Values can be given as strings, where a trailing ``;`` is removed and a
    ``!important`` annotation sets the importance flag. Setting an empty
    value removes the property.

    """
    def __init__(self, declarations=None):
        self._declarations = {}
        if declarations is not None:
            if hasattr(declarations, 'items'):
                declarations = declarations.items()
            for name, value in declarations:
                self.add_declaration(name, value)

    def add_declaration(self, name, value, important=False):
        """Set the declaration of ``name``."""
        name = name.strip()
        if isinstance(value, Declaration):
            self._declarations[name] = value
            return
        value = TRAILING_SEMICOLON.sub('', str(value))
        value, count = IMPORTANT.subn(' ', value)
        value = value.strip()
        if value:
            self._declarations[name] = Declaration(value, important or bool(count))
        else:
            self.delete(name)

    __setitem__ = add_declaration

    def delete(self, name):
        """Remove the declaration of ``name`` if any, and return it."""
        return self._declarations.pop(name.strip(), None)

    def get(self, name, default=None):
        return self._declarations.get(name.strip(), default)

    def __getitem__(self, name):
        return self._declarations[name.strip()]

    def __delitem__(self, name):
        del self._declarations[name.strip()]

    def __contains__(self, name):
        return name.strip() in self._declarations

    def __iter__(self):
        return iter(self._declarations)

    def __len__(self):
        return len(self._declarations)

    def __eq__(self, other):
        if not isinstance(other, Declarations):
            return NotImplemented
        return list(self.items()) == list(other.items())

    def __repr__(self):
        return f'<{type(self).__name__} {self.to_s()}>'

    def __str__(self):
        return self.to_s()

    def items(self):
        return self._declarations.items()

    @contextlib.contextmanager
    def transaction(self):
        """Restore the declarations when an exception is raised."""
        backup = dict(self._declarations)
        try:
            yield self
        except Exception:
            self._declarations = backup
            raise

    def replace_declaration(self, name, replacements, preserve_importance=False):
        """Replace the declaration of ``name`` by ``replacements``.

        ``replacements`` maps property names to values, ``None`` values are
        ignored. The new declarations are inserted where ``name`` was
        declared, and ``name`` is removed even if nothing replaces it.

        A property that is already declared keeps its current value when
        it's important and the replacement is not, or when it's declared
        after ``name`` with the same importance.

        When ``preserve_importance`` is set, replacements get the importance
        of the replaced declaration.

        """
        name = name.strip()
        replaced = self._declarations[name]
        new_declarations = Declarations(
            (new_name, value) for new_name, value in replacements.items()
            if value is not None)
        names = list(self._declarations)
        index = names.index(name)

        inserted = {}
        for new_name, declaration in new_declarations.items():
            if preserve_importance:
                declaration = declaration._replace(important=replaced.important)
            existing = self._declarations.get(new_name)
            if existing is None:
                inserted[new_name] = declaration
            elif declaration.important and not existing.important:
                inserted[new_name] = declaration
            elif existing.important and not declaration.important:
                continue
            elif names.index(new_name) < index:
                inserted[new_name] = declaration

        declarations = {}
        for key in names:
            if key == name:
                declarations.update(inserted)
            elif key not in inserted:
                declarations[key] = self._declarations[key]
        self._declarations = declarations

    def to_s(self, force_important=False):
        """Serialize the declarations as ``name: value;`` pairs."""
        return ' '.join(
            f'{name}: {declaration.value}'
            f'{" !important" if force_important or declaration.important else ""};'
            for name, declaration in self._declarations.items())
