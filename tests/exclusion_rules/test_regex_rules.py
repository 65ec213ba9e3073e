"""Unit tests for regular expression path exclusion."""

import logging

import pytest

from dirtree.exclusion_rules import BaseExclusionRules, RegexExclusionRules


class TestRegexExclusionRules:
    """Test the RegexExclusionRules class."""

    def test_no_patterns(self):
        """Test that empty rules exclude nothing."""
        rules = RegexExclusionRules()

        assert not rules.has_rules()
        assert not rules.exclude("/project/src/main.py")

    def test_search_semantics(self):
        """Test that a pattern may match anywhere in the path."""
        rules = RegexExclusionRules([r"node_modules"])

        assert rules.exclude("/project/node_modules")
        assert rules.exclude("/project/node_modules/lodash/index.js")
        assert not rules.exclude("/project/src/modules")

    def test_anchored_pattern(self):
        """Test that anchors restrict matches to the end of the path."""
        rules = RegexExclusionRules([r"/\.git$"])

        assert rules.exclude("/project/.git")
        assert not rules.exclude("/project/.github")
        assert not rules.exclude("/project/.gitignore")

    def test_any_pattern_matches(self):
        """Test that one matching pattern out of several is enough."""
        rules = RegexExclusionRules([r"\.pyc$", r"__pycache__"])

        assert rules.exclude("pkg/__pycache__")
        assert rules.exclude("pkg/module.pyc")
        assert not rules.exclude("pkg/module.py")

    def test_case_sensitive(self):
        rules = RegexExclusionRules([r"build"])

        assert rules.exclude("/project/build")
        assert not rules.exclude("/project/BUILD")

    def test_invalid_pattern_matches_nothing(self, caplog):
        """Test that a malformed pattern is recorded and ignored."""
        with caplog.at_level(logging.WARNING, logger="dirtree"):
            rules = RegexExclusionRules(["[", "("])

        assert rules.patterns == ["[", "("]
        assert rules.invalid_patterns == ["[", "("]
        assert not rules.has_rules()
        assert not rules.exclude("[")
        assert not rules.exclude("/any/path")
        assert caplog.text.count("Ignoring invalid exclusion pattern") == 2

    def test_invalid_pattern_does_not_disable_valid_ones(self):
        rules = RegexExclusionRules(["[unclosed", r"\.log$"])

        assert rules.has_rules()
        assert rules.exclude("/var/app.log")
        assert rules.invalid_patterns == ["[unclosed"]

    def test_add_rule(self):
        rules = RegexExclusionRules()
        rules.add_rule(r"^/tmp/")

        assert rules.patterns == [r"^/tmp/"]
        assert rules.exclude("/tmp/scratch")
        assert not rules.exclude("/home/tmp/scratch")

    def test_is_exclusion_rules(self):
        assert isinstance(RegexExclusionRules(), BaseExclusionRules)


def test_base_rules_cannot_be_instantiated():
    with pytest.raises(TypeError):
        BaseExclusionRules()  # type: ignore[abstract]


def test_base_add_rule_not_supported():
    """Test the default add_rule of a rules class without per-rule support."""

    class FixedRules(BaseExclusionRules):
        def exclude(self, path: str) -> bool:
            return path == "fixed"

        def has_rules(self) -> bool:
            return True

    rules = FixedRules()
    with pytest.raises(NotImplementedError, match="FixedRules doesn't support adding individual rules"):
        rules.add_rules(["anything"])
