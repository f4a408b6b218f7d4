"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from jt.cli import cli
from jt.options import OutputFormat, RenderOptions


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["data.json", ".users"])
        result = invoke([".users[0]"], input_data='{"users": [1]}')
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def test_data():
    """Provide path to test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def plain():
    """Options for uncoloured terminal tables."""
    return RenderOptions()


@pytest.fixture
def html():
    return RenderOptions(output_format=OutputFormat.HTML)


@pytest.fixture
def sample_json():
    """Provide a small nested JSON document as a string."""
    return (
        '{"name": "jt", "version": 2, "stable": true,'
        ' "users": [{"name": "Alice", "age": 30}, {"name": "Bob", "age": 25}]}'
    )
