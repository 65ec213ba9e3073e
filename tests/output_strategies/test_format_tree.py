import json

import pytest

from dirtree.exceptions import UnsupportedFormatError
from dirtree.output_strategies import (
    STRATEGIES,
    JSONOutputStrategy,
    TextOutputStrategy,
    XMLOutputStrategy,
    YAMLOutputStrategy,
    create_strategy,
    format_tree,
)
from dirtree.types import NodeField, OutputFormat


@pytest.mark.parametrize(
    "selector, strategy_class",
    [
        ("json", JSONOutputStrategy),
        ("YAML", YAMLOutputStrategy),
        ("Xml", XMLOutputStrategy),
        ("txt", TextOutputStrategy),
        (OutputFormat.YAML, YAMLOutputStrategy),
    ],
)
def test_create_strategy(selector, strategy_class):
    assert isinstance(create_strategy(selector), strategy_class)


def test_create_strategy_configuration():
    strategy = create_strategy("json", indent=4, exclude_fields=["SIZE", " path "])

    assert strategy.indent == 4
    assert strategy.exclude_fields == {NodeField.SIZE, NodeField.PATH}


@pytest.mark.parametrize("selector", ["csv", "", "yml", "text"])
def test_unsupported_format(selector):
    with pytest.raises(UnsupportedFormatError) as excinfo:
        create_strategy(selector)

    assert excinfo.value.output_format == selector
    assert str(excinfo.value) == f"Unsupported format: {selector}"


def test_every_format_has_a_strategy():
    assert set(STRATEGIES) == set(OutputFormat)
    for output_format, strategy_class in STRATEGIES.items():
        assert strategy_class.output_format is output_format


def test_format_tree(small_tree):
    output = format_tree(small_tree, "json", indent=0, exclude_fields=["children"])

    assert json.loads(output) == {"name": "src", "path": "src", "type": "directory", "size": 0, "is_hidden": False}


@pytest.mark.parametrize(
    "output_format, expected",
    [("json", b"null"), ("xml", b""), ("txt", b"")],
)
def test_format_empty_tree(output_format, expected):
    assert format_tree(None, output_format) == expected


def test_format_tree_rejects_unknown_format(small_tree):
    with pytest.raises(UnsupportedFormatError, match="Unsupported format: toml"):
        format_tree(small_tree, "toml")


def test_undecodable_names_round_trip(small_tree):
    small_tree.children[0].name = b"caf\xe9.txt".decode("utf-8", "surrogateescape")

    output = format_tree(small_tree, "txt")

    assert b"caf\xe9.txt" in output
