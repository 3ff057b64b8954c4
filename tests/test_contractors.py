"""Test contractors folding longhand properties into shorthand properties."""

import pytest

from cssfold import RuleSet
from cssfold.dimensions import minimal_dimensions

from .testing_utils import assert_no_logs, declarations_dict


def contract_to_dict(css):
    """Helper to test shorthand properties contractor functions."""
    rule_set = RuleSet(block=css)
    rule_set.create_shorthand()
    return declarations_dict(rule_set)


@assert_no_logs
@pytest.mark.parametrize('sides, expected', (
    (('1px', '1px', '1px', '1px'), ['1px']),
    (('1px', '2px', '1px', '2px'), ['1px', '2px']),
    (('1px', '2px', '3px', '2px'), ['1px', '2px', '3px']),
    (('1px', '2px', '1px', '4px'), ['1px', '2px', '1px', '4px']),
    (('1px', '2px', '3px', '4px'), ['1px', '2px', '3px', '4px']),
))
def test_minimal_dimensions(sides, expected):
    assert minimal_dimensions(*sides) == expected


@assert_no_logs
@pytest.mark.parametrize('css, result', (
    ('margin-top: 1px; margin-right: 2px; margin-bottom: 1px; margin-left: 2px',
     {'margin': '1px 2px'}),
    ('padding-top: 0; padding-right: 0; padding-bottom: 0; padding-left: 0',
     {'padding': '0'}),
    ('margin-top: inherit; margin-right: inherit; '
     'margin-bottom: inherit; margin-left: inherit',
     {'margin': 'inherit'}),
    ('border-top-color: red; border-right-color: blue; '
     'border-bottom-color: red; border-left-color: green',
     {'border-color': 'red blue red green'}),
))
def test_dimensions(css, result):
    assert contract_to_dict(css) == result


@assert_no_logs
@pytest.mark.parametrize('css', (
    'margin-top: 1px; margin-right: 1px; margin-bottom: 1px',
    'margin-top: 1px !important; margin-right: 1px; '
    'margin-bottom: 1px; margin-left: 1px',
))
def test_dimensions_kept(css):
    rule_set = RuleSet(block=css)
    before = rule_set.declarations_to_s()
    rule_set.create_shorthand()
    assert rule_set.declarations_to_s() == before


@assert_no_logs
@pytest.mark.parametrize('css, result', (
    ('background-color: #fff; background-image: url(x.png); '
     'background-repeat: no-repeat; background-size: cover',
     {'background': '#fff url(x.png) no-repeat 0% 0% / cover'}),
    ('background-color: red; background-image: none',
     {'background': 'red none'}),
    ('background-position: 0 0 !important; background-size: cover; '
     'background-color: red; background-image: none',
     {'background-position': '0 0', 'background-size': 'cover',
      'background': 'red none'}),
    ('background-color: red',
     {'background-color': 'red'}),
))
def test_background(css, result):
    assert contract_to_dict(css) == result


@assert_no_logs
@pytest.mark.parametrize('css, result', (
    ('border-width: 1px; border-style: solid; border-color: red',
     {'border': '1px solid red'}),
    ('border-width: 1px 2px; border-style: solid; border-color: red',
     {'border-width': '1px 2px', 'border-style': 'solid',
      'border-color': 'red'}),
    ('border-width: 1px; border-style: solid',
     {'border-width': '1px', 'border-style': 'solid'}),
))
def test_border(css, result):
    assert contract_to_dict(css) == result


@assert_no_logs
def test_border_from_sides():
    css = '; '.join(
        f'border-{side}-{key}: {value}'
        for side in ('top', 'right', 'bottom', 'left')
        for key, value in (('width', '2px'), ('style', 'dashed'), ('color', 'red')))
    assert contract_to_dict(css) == {'border': '2px dashed red'}


@assert_no_logs
@pytest.mark.parametrize('css, result', (
    ('font-style: italic; font-variant: normal; font-weight: bold; '
     'font-size: 12px; line-height: 30px; font-family: Georgia, serif',
     {'font': 'italic bold 12px/30px Georgia, serif'}),
    ('font-style: normal; font-variant: normal; font-weight: normal; '
     'font-size: 12px; line-height: normal; font-family: serif',
     {'font': '12px serif'}),
    ('font-style: inherit; font-variant: inherit; font-weight: inherit; '
     'font-size: inherit; line-height: inherit; font-family: inherit',
     {'font': 'inherit'}),
    ('font-style: italic; font-weight: bold; font-size: 12px; '
     'line-height: 30px; font-family: serif',
     {'font-style': 'italic', 'font-weight': 'bold', 'font-size': '12px',
      'line-height': '30px', 'font-family': 'serif'}),
))
def test_font(css, result):
    assert contract_to_dict(css) == result


@assert_no_logs
def test_font_important():
    css = (
        'font-style: italic; font-variant: normal; font-weight: bold; '
        'font-size: 12px !important; line-height: 30px; font-family: serif')
    rule_set = RuleSet(block=css)
    rule_set.create_shorthand()
    assert 'font' not in rule_set.declarations
    assert rule_set['font-size'] == '12px !important;'


@assert_no_logs
@pytest.mark.parametrize('css, result', (
    ('list-style-type: square; list-style-position: inside',
     {'list-style': 'square inside'}),
    ('list-style-image: none; list-style-type: disc',
     {'list-style': 'disc none'}),
    ('list-style-type: inherit; list-style-position: inherit; '
     'list-style-image: inherit',
     {'list-style': 'inherit'}),
    ('list-style-type: square',
     {'list-style-type': 'square'}),
    ('list-style-type: square; list-style-position: inside !important',
     {'list-style-type': 'square', 'list-style-position': 'inside'}),
))
def test_list_style(css, result):
    assert contract_to_dict(css) == result


@assert_no_logs
@pytest.mark.parametrize('css', (
    'margin: 0 auto',
    'padding: 1px 2px 3px',
    'border: 1px solid red',
    'font: italic bold 12px/30px Georgia, serif',
    'background: url(x.png) no-repeat',
    'list-style: square inside',
))
def test_round_trip(css):
    rule_set = RuleSet(block=css)
    rule_set.expand_shorthand()
    rule_set.create_shorthand()
    assert rule_set.declarations_to_s() == f'{css};'
