"""End-to-end tests for the jt command."""

import json

from jt import __version__
from jt.cli import cli


class TestInputSources:
    def test_stdin_identity(self, invoke, sample_json):
        result = invoke([], input_data=sample_json)
        assert result.exit_code == 0
        assert "Alice" in result.output
        assert "\x1b[" not in result.output

    def test_stdin_with_selector(self, invoke, sample_json):
        result = invoke([".users[1].name"], input_data=sample_json)
        assert result.exit_code == 0
        assert "value" in result.output
        assert "Bob" in result.output
        assert "Alice" not in result.output

    def test_file(self, invoke, test_data):
        result = invoke([str(test_data / "people.json")])
        assert result.exit_code == 0
        assert "platform" in result.output
        assert "Carol" in result.output

    def test_file_and_selector(self, invoke, test_data):
        result = invoke([str(test_data / "people.json"), ".members"])
        assert result.exit_code == 0
        header = result.output.splitlines()[1]
        assert "[key]" in header
        assert header.index("active") < header.index("name") < header.index("role")

    def test_xml_file(self, invoke, test_data):
        result = invoke([str(test_data / "catalog.xml"), ".book[1].title"])
        assert result.exit_code == 0
        assert "Emma" in result.output

    def test_yaml_stdin(self, invoke):
        result = invoke([".port"], input_data="name: api\nport: 8080\n")
        assert result.exit_code == 0
        assert "8080" in result.output

    def test_yaml_bool_and_int_keys(self, invoke):
        result = invoke([], input_data="1: one\ntrue: yes\n")
        assert result.exit_code == 0
        assert "one" in result.output and "yes" in result.output


class TestMultiDocument:
    def test_whole_stream(self, invoke, test_data):
        result = invoke([str(test_data / "services.yaml")])
        assert result.exit_code == 0
        assert "api" in result.output and "worker" in result.output

    def test_selector_fans_out(self, invoke, test_data):
        result = invoke([str(test_data / "services.yaml"), ".name"])
        assert result.exit_code == 0
        assert result.output.count("value") == 2
        assert result.output.index("api") < result.output.index("worker")

    def test_index_picks_document(self, invoke, test_data):
        result = invoke([str(test_data / "services.yaml"), ".[1]"])
        assert result.exit_code == 0
        assert "9090" in result.output
        assert "8080" not in result.output


class TestErrors:
    def test_recursive_alias(self, invoke):
        result = invoke([], input_data="a: &x\n  - *x\n")
        assert result.exit_code == 1
        assert "Error: Input contains a recursive alias." in result.output

    def test_missing_key(self, invoke, sample_json):
        result = invoke([".missing"], input_data=sample_json)
        assert result.exit_code == 1
        assert "Error: key 'missing' not found in path '.missing'" in result.output

    def test_index_out_of_bounds(self, invoke, sample_json):
        result = invoke([".users[5]"], input_data=sample_json)
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_bad_index(self, invoke, sample_json):
        result = invoke([".users[x]"], input_data=sample_json)
        assert result.exit_code == 1
        assert "invalid array index 'x'" in result.output

    def test_missing_file(self, invoke):
        result = invoke(["no-such-file.json"], input_data="{}")
        assert result.exit_code == 1
        assert "Error: file not found: no-such-file.json" in result.output

    def test_invalid_input(self, invoke):
        result = invoke([], input_data="{unclosed")
        assert result.exit_code == 1
        assert "Error: Input is not valid JSON or YAML." in result.output

    def test_empty_input(self, invoke):
        result = invoke([], input_data="")
        assert result.exit_code == 1
        assert "Error: no data to process" in result.output


class TestOptions:
    def test_html(self, invoke, sample_json):
        result = invoke(["--format", "html"], input_data=sample_json)
        assert result.exit_code == 0
        assert result.output.startswith("<style>")
        assert '<span class="jt-string">Alice</span>' in result.output

    def test_markdown(self, invoke, sample_json):
        result = invoke(["--format", "markdown", ".users"], input_data=sample_json)
        assert result.exit_code == 0
        assert result.output.startswith("| [key]")

    def test_svg(self, invoke, sample_json):
        result = invoke(["--format", "svg"], input_data=sample_json)
        assert result.exit_code == 0
        assert result.output.startswith("<svg")

    def test_unknown_format(self, invoke, sample_json):
        result = invoke(["--format", "pdf"], input_data=sample_json)
        assert result.exit_code == 2

    def test_format_from_environment(self, cli_runner, sample_json):
        result = cli_runner.invoke(
            cli, [], input=sample_json, env={"JT_FORMAT": "markdown"}
        )
        assert result.exit_code == 0
        assert result.output.startswith("|")

    def test_details(self, invoke, sample_json):
        result = invoke(["-d"], input_data=sample_json)
        assert result.exit_code == 0
        assert "[-] object, 4 properties" in result.output
        assert "[-] array, 2 items" in result.output

    def test_width(self, invoke):
        data = json.dumps({"text": "abcdefghijklmnopqrstuvwxyz"})
        result = invoke(["-w", "10"], input_data=data)
        assert result.exit_code == 0
        assert "abcdefg..." in result.output
        assert "hijk" not in result.output

    def test_width_minimum(self, invoke, sample_json):
        result = invoke(["-w", "3"], input_data=sample_json)
        assert result.exit_code == 2

    def test_no_pager(self, invoke, sample_json):
        result = invoke(["--no-pager"], input_data=sample_json)
        assert result.exit_code == 0
        assert "Alice" in result.output

    def test_version(self, invoke):
        result = invoke(["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help(self, invoke):
        result = invoke(["--help"])
        assert result.exit_code == 0
        assert "--format" in result.output
