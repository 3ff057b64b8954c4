"""Command-line interface to cssfold."""

import argparse
import logging
import sys

from . import DEFAULT_OPTIONS, LOGGER, InvalidValues, RuleSet, __version__


class Parser(argparse.ArgumentParser):
    """Argument parser documenting its options as reStructuredText."""

    @property
    def docstring(self):
        options = []
        for action in self._actions:
            if action.dest == 'help':
                continue
            if action.option_strings:
                takes_value = action.nargs != 0
                flags = ', '.join(
                    f'{flag} <{action.dest}>' if takes_value else flag
                    for flag in action.option_strings)
            else:
                flags = action.dest
            text = action.help
            options.append(
                f'.. option:: {flags}\n\n  {text[0].upper()}{text[1:]}.\n\n')
        return ''.join(options)


PARSER = Parser(
    prog='cssfold',
    description='Expand CSS shorthand properties or fold them back.')
PARSER.add_argument(
    'input', help='filename of the CSS declarations, or - for stdin')
PARSER.add_argument(
    '-s', '--selector',
    help='comma-separated selectors of the rule, only declarations are '
    'printed when not given')
PARSER.add_argument(
    '-e', '--expand', action='store_true',
    help='split shorthand properties into longhand properties')
PARSER.add_argument(
    '-c', '--contract', action='store_true',
    help='fold longhand properties into shorthand properties, '
    'after expansion when both are asked')
PARSER.add_argument(
    '--force-important', action='store_true',
    help='mark all the declarations as important')
PARSER.add_argument(
    '-v', '--verbose', action='store_true',
    help='show warnings and information messages')
PARSER.add_argument(
    '-d', '--debug', action='store_true', help='show debugging messages')
PARSER.add_argument(
    '-q', '--quiet', action='store_true', help='hide logging messages')
PARSER.add_argument(
    '--version', action='version',
    version=f'cssfold version {__version__}',
    help='print cssfold’s version number and exit')
PARSER.set_defaults(**DEFAULT_OPTIONS)


def main(argv=None, stdout=None, stdin=None):
    """The ``cssfold`` program takes one argument:

    .. code-block:: sh

        cssfold [options] <input>

    """
    args = PARSER.parse_args(argv)

    if args.input == '-':
        block = (stdin or sys.stdin).read()
    else:
        with open(args.input, encoding='utf-8') as fd:
            block = fd.read()
    output = stdout or sys.stdout

    options = {
        key: value for key, value in vars(args).items() if key in DEFAULT_OPTIONS}

    # Default to logging to stderr.
    if args.debug:
        LOGGER.setLevel(logging.DEBUG)
    elif args.verbose:
        LOGGER.setLevel(logging.INFO)
    if not args.quiet:
        handler = logging.StreamHandler()
        if args.debug:
            # Add extra information when debug logging
            handler.setFormatter(
                logging.Formatter(
                    '%(levelname)s: %(filename)s:%(lineno)d '
                    '(%(funcName)s): %(message)s'))
        else:
            handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        LOGGER.addHandler(handler)

    rule_set = RuleSet(selectors=args.selector, block=block)
    try:
        if args.expand:
            rule_set.expand_shorthand()
    except InvalidValues as exception:
        PARSER.exit(1, f'{PARSER.prog}: error: {exception}\n')
    if args.contract:
        rule_set.create_shorthand()

    declarations = rule_set.declarations_to_s(**options)
    if rule_set.selectors:
        output.write(f'{",".join(rule_set.selectors)} {{ {declarations} }}\n')
    else:
        output.write(f'{declarations}\n')


main.__doc__ += '\n\n' + PARSER.docstring


if __name__ == '__main__':  # pragma: no cover
    main()
