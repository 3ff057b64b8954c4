"""Test the scanner of the font shorthand."""

import pytest

from cssfold import InvalidValues
from cssfold.font import FontScanner, FontValues, scan_font
from cssfold.tokens import parse_value

from .testing_utils import assert_no_logs


@assert_no_logs
@pytest.mark.parametrize('value, expected, family', (
    ('300 italic 11px/14px verdana, helvetica, sans-serif',
     FontValues(style='italic', weight='300', size='11px', line_height='14px'),
     'verdana, helvetica, sans-serif'),
    ('italic 300 11px/14px verdana, helvetica, sans-serif',
     FontValues(style='italic', weight='300', size='11px', line_height='14px'),
     'verdana, helvetica, sans-serif'),
    ('bold 12px serif',
     FontValues(weight='bold', size='12px'), 'serif'),
    ('small-caps bold italic large / 1.5 "Times New Roman", serif',
     FontValues(
         style='italic', variant='small-caps', weight='bold', size='large',
         line_height='1.5'),
     '"Times New Roman", serif'),
    ('normal normal normal 12px/normal serif',
     FontValues(size='12px'), 'serif'),
    ('italic normal 12px serif',
     FontValues(style='normal', size='12px'), 'serif'),
    ('bold normal 12px serif',
     FontValues(weight='bold', size='12px'), 'serif'),
    ('bold inherit serif',
     FontValues(weight='bold', size='inherit'), 'serif'),
    ('12px/inherit serif',
     FontValues(size='12px', line_height='inherit'), 'serif'),
    ('0 serif', FontValues(size='0'), 'serif'),
    ('0/0 serif', FontValues(size='0', line_height='0'), 'serif'),
    ('italic oblique 12px serif',
     FontValues(style='oblique', size='12px'), 'serif'),
    ('80% sans-serif', FontValues(size='80%'), 'sans-serif'),
    ('smaller fantasy', FontValues(size='smaller'), 'fantasy'),
    ('1.2em/120% Arial', FontValues(size='1.2em', line_height='120%'), 'Arial'),
    ('12px', FontValues(size='12px'), None),
))
def test_scan_font(value, expected, family):
    assert scan_font(value) == (expected, family)


@assert_no_logs
@pytest.mark.parametrize('value', (
    'menu', 'caption', 'Status-Bar', ' message-box '))
def test_scan_font_system(value):
    assert scan_font(value) is None


@assert_no_logs
@pytest.mark.parametrize('value, message', (
    ('bold serif', 'Expected a font size'),
    ('italic', 'Expected a font size'),
    ('950 12px serif', 'Expected a font size'),
    ('12 serif', 'Expected a font size'),
    ('12px/ serif', 'Expected a line height'),
    ('12px/', 'Expected a line height'),
))
def test_scan_font_invalid(value, message):
    with pytest.raises(InvalidValues) as exception:
        scan_font(value)
    assert message in str(exception.value)


@assert_no_logs
def test_scanner_is_one_way():
    scanner = FontScanner(parse_value(' bold  12px serif'))
    assert scanner.consume_style_variant_weight()[0] == 'weight'
    assert scanner.consume_style_variant_weight() is None
    position = scanner.position
    assert scanner.peek().serialize() == '12px'
    assert scanner.position >= position
    assert scanner.consume(lambda token: token.type == 'ident') is None
    assert scanner.consume(lambda token: token.type == 'dimension') is not None
    assert scanner.consume_rest() == 'serif'
    assert scanner.peek() is None
    assert scanner.consume_rest() == ''
