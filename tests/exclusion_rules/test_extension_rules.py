import pytest

from dirtree.exclusion_rules import ExtensionExclusionRules
from dirtree.exclusion_rules.extension_rules import get_extension


@pytest.mark.parametrize(
    "path, expected",
    [
        ("main.go", ".go"),
        ("src/Main.GO", ".go"),
        ("archive.tar.gz", ".gz"),
        (".bashrc", ".bashrc"),
        ("README", ""),
        ("dir.d/README", ""),
        ("trailing.", "."),
    ],
)
def test_get_extension(path, expected):
    assert get_extension(path) == expected


def test_extensions_are_normalized():
    rules = ExtensionExclusionRules([".GO", "txt", "  .Log  ", "", "   "])

    assert rules.extensions == {".go", ".txt", ".log"}
    assert rules.has_rules()


@pytest.mark.parametrize("path", ["main.go", "MAIN.GO", "/src/pkg/util.Go", "notes.txt", "app.log"])
def test_excluded(path):
    rules = ExtensionExclusionRules(["go", ".txt", ".LOG"])
    assert rules.exclude(path)


@pytest.mark.parametrize("path", ["main.py", "go", "README", "golang.gopher", "/src/go/main.rs"])
def test_not_excluded(path):
    rules = ExtensionExclusionRules(["go", ".txt", ".LOG"])
    assert not rules.exclude(path)


def test_no_rules():
    rules = ExtensionExclusionRules()

    assert not rules.has_rules()
    assert not rules.exclude("main.go")
    assert not rules.exclude("README")


def test_dotfile_counts_as_extension():
    rules = ExtensionExclusionRules([".env"])

    assert rules.exclude("/project/.env")
    assert not rules.exclude("/project/.env.local")
