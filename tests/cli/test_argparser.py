"""Unit tests for the argument parser module in dirtree CLI."""

import argparse
from pathlib import Path

import pytest

from dirtree.cli.argparser import build_config, create_parser, validate_args
from dirtree.config import Config
from dirtree.exceptions import ConfigError


@pytest.fixture
def parser():
    return create_parser()


@pytest.fixture
def config_file(tmp_path):
    """Create a YAML config file with non-default values."""
    path = tmp_path / "dirtree.yaml"
    path.write_text(
        "path: /srv/data\n"
        "max_depth: 4\n"
        "exclude_types: [.log]\n"
        "follow_links: true\n"
        "format:\n"
        "  type: yaml\n"
        "  indent: 4\n"
        "  exclude_node_fields: [path]\n"
    )
    return path


def test_no_arguments_yields_empty_namespace(parser):
    """Test that defaults are suppressed so only explicit options are present."""
    args = parser.parse_args([])

    assert vars(args) == {}


def test_all_options(parser):
    args = parser.parse_args(
        [
            "/project",
            "-f",
            "XML",
            "-o",
            "out/tree",
            "-d",
            "3",
            "-e",
            r"\.git$,build",
            "-e",
            "dist",
            "-x",
            ".pyc",
            "--no-include-files",
            "-L",
            "-F",
            "size,path",
            "--indent",
            "4",
            "-s",
            "-vv",
        ]
    )

    assert args.path == "/project"
    assert args.output_format == "xml"
    assert args.output == "out/tree"
    assert args.max_depth == 3
    assert args.exclude_paths == [r"\.git$", "build", "dist"]
    assert args.exclude_types == [".pyc"]
    assert args.include_files is False
    assert args.follow_links is True
    assert args.exclude_node_fields == ["size", "path"]
    assert args.indent == 4
    assert args.summary is True
    assert args.verbose == 2


def test_long_option_names(parser):
    args = parser.parse_args(
        ["--format", "txt", "--max-depth", "1", "--exclude-path", "tmp", "--exclude-type", "log", "--follow-links"]
    )

    assert args.output_format == "txt"
    assert args.max_depth == 1
    assert args.exclude_paths == ["tmp"]
    assert args.exclude_types == ["log"]
    assert args.follow_links is True


def test_no_follow_links(parser):
    assert parser.parse_args(["--no-follow-links"]).follow_links is False


def test_config_option_is_a_path(parser):
    assert parser.parse_args(["-c", "dirtree.yaml"]).config == Path("dirtree.yaml")


@pytest.mark.parametrize("argv", [["-f", "csv"], ["-d", "two"], ["--indent", "x"], ["a", "b"]])
def test_invalid_arguments_exit_with_usage_error(parser, argv):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(argv)

    assert excinfo.value.code == 2


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("dirtree ")


class TestValidateArgs:
    def test_valid(self, config_file):
        validate_args(argparse.Namespace(config=config_file, max_depth=-1, indent=0))

    def test_empty_namespace(self):
        validate_args(argparse.Namespace())

    def test_missing_config_file(self, tmp_path):
        with pytest.raises(ValueError, match="Config file not found"):
            validate_args(argparse.Namespace(config=tmp_path / "missing.yaml"))

    def test_config_directory_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="Config file not found"):
            validate_args(argparse.Namespace(config=tmp_path))

    def test_negative_depth(self):
        with pytest.raises(ValueError, match="--max-depth cannot be less than -1"):
            validate_args(argparse.Namespace(max_depth=-2))

    def test_negative_indent(self):
        with pytest.raises(ValueError, match="--indent cannot be negative"):
            validate_args(argparse.Namespace(indent=-1))


class TestBuildConfig:
    def test_defaults(self, parser):
        assert build_config(parser.parse_args([])) == Config()

    def test_flags_only(self, parser):
        config = build_config(parser.parse_args(["src", "-d", "2", "-f", "txt", "-o", "tree", "-F", "size"]))

        assert config.path == "src"
        assert config.max_depth == 2
        assert config.format.output_format == "txt"
        assert config.format.output_path == "tree"
        assert config.format.exclude_node_fields == ["size"]

    def test_config_file_values(self, parser, config_file):
        config = build_config(parser.parse_args(["-c", str(config_file)]))

        assert config.path == "/srv/data"
        assert config.max_depth == 4
        assert config.exclude_types == [".log"]
        assert config.follow_links is True
        assert config.format.output_format == "yaml"
        assert config.format.indent == 4
        assert config.format.exclude_node_fields == ["path"]

    def test_explicit_flags_override_config_file(self, parser, config_file):
        """Test that flags given on the command line take precedence over the file."""
        config = build_config(
            parser.parse_args(["-c", str(config_file), "/other", "-d", "0", "--no-follow-links", "-f", "json"])
        )

        assert config.path == "/other"
        assert config.max_depth == 0
        assert config.follow_links is False
        assert config.format.output_format == "json"
        # Options not given on the command line keep the file's values
        assert config.exclude_types == [".log"]
        assert config.format.indent == 4

    def test_list_flags_replace_file_lists(self, parser, config_file):
        config = build_config(parser.parse_args(["-c", str(config_file), "-x", ".tmp"]))

        assert config.exclude_types == [".tmp"]

    def test_invalid_config_file(self, parser, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("max_depth: deep\n")

        with pytest.raises(ConfigError, match="'max_depth' must be of type int"):
            build_config(parser.parse_args(["-c", str(bad)]))
