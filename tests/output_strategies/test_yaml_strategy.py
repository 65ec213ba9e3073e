import yaml

from dirtree.file_system_tree import FileSystemNode
from dirtree.output_strategies.yaml_strategy import YAMLOutputStrategy


def test_null_tree():
    output = YAMLOutputStrategy().format_tree(None)

    assert yaml.safe_load(output) is None


def test_leaf_document():
    output = YAMLOutputStrategy().format_tree(FileSystemNode("a.txt", file_size=10))

    assert output == b"name: a.txt\npath: a.txt\ntype: file\nsize: 10\nis_hidden: false\n"


def test_format_tree(small_tree):
    document = yaml.safe_load(YAMLOutputStrategy().format_tree(small_tree))

    assert list(document) == ["name", "path", "type", "size", "is_hidden", "children"]
    assert [child["name"] for child in document["children"]] == ["a.txt", ".env", "empty", "link"]
    assert document["children"][1]["is_hidden"] is True
    assert document["children"][2]["children"] == []


def test_block_style(small_tree):
    output = YAMLOutputStrategy().format_tree(small_tree)

    assert b"{" not in output
    assert b"children:\n" in output


def test_excluded_fields(small_tree):
    strategy = YAMLOutputStrategy(exclude_fields=["children", "path"])

    assert strategy.format_tree(small_tree) == b"name: src\ntype: directory\nsize: 0\nis_hidden: false\n"


def test_unicode_names_are_not_escaped():
    output = YAMLOutputStrategy(exclude_fields=["path", "type", "size", "is_hidden"]).format_tree(
        FileSystemNode("résumé.pdf")
    )

    assert output == "name: résumé.pdf\n".encode("utf-8")


def test_file_extension():
    assert YAMLOutputStrategy().get_file_extension() == ".yaml"
