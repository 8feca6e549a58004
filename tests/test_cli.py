"""End-to-end tests for the command-line interface."""

import pytest
from click.testing import CliRunner
from graphql import parse

from gql_tsgen.cli import main
from gql_tsgen.core import emitter
from gql_tsgen.core.errors import TransportError

URL = "http://localhost:4000/graphql"

NOW_MODULE = (
    'import gql from "graphql-tag";\n'
    "\n"
    "export default gql`\n"
    "  query Now {\n"
    "    now\n"
    "  }\n"
    "`;\n"
)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def fetches(monkeypatch, sample_sdl):
    """Serve the sample schema instead of fetching it, recording the calls."""
    calls = []

    async def fetch_schema(url, timeout=30.0):
        calls.append(url)
        return parse(sample_sdl)

    monkeypatch.setattr(emitter, "fetch_schema", fetch_schema)
    return calls


@pytest.fixture
def now_only(monkeypatch):
    async def fetch_schema(url, timeout=30.0):
        return parse("type Query { now: String }")

    monkeypatch.setattr(emitter, "fetch_schema", fetch_schema)


class TestList:
    """Tests for the list command."""

    def test_lists_queries(self, runner, now_only):
        result = runner.invoke(main, ["list", URL, "query"])
        assert result.exit_code == 0
        assert result.output == "now\n"

    def test_no_mutation_root(self, runner, now_only):
        result = runner.invoke(main, ["list", URL, "mutation"])
        assert result.exit_code == 0
        assert result.output == ""

    def test_catalog_order(self, runner, fetches):
        result = runner.invoke(main, ["list", URL, "query"])
        assert result.output.splitlines() == ["now", "user", "users", "foo"]
        assert fetches == [URL]

    def test_rejects_unknown_kind(self, runner, fetches):
        result = runner.invoke(main, ["list", URL, "subscription"])
        assert result.exit_code == 2
        assert fetches == []


class TestGenerate:
    """Tests for the generate command."""

    def test_prints_module(self, runner, now_only):
        result = runner.invoke(main, ["generate", URL, "query", "now"])
        assert result.exit_code == 0
        assert result.output == "// NowQuery.ts\n" + NOW_MODULE

    def test_no_operations_is_a_no_op(self, runner, fetches):
        result = runner.invoke(main, ["generate", URL, "query"])
        assert result.exit_code == 0
        assert result.output == ""
        assert fetches == []

    def test_unknown_operation_prints_nothing(self, runner, fetches):
        result = runner.invoke(main, ["generate", URL, "query", "missing"])
        assert result.exit_code == 0
        assert result.output == ""

    def test_prints_in_schema_order(self, runner, fetches):
        result = runner.invoke(main, ["generate", URL, "query", "foo", "now"])
        headers = [line for line in result.output.splitlines() if line.startswith("// ")]
        assert headers == ["// NowQuery.ts", "// FooQuery.ts"]

    def test_max_depth_option(self, runner, fetches):
        result = runner.invoke(main, ["generate", URL, "query", "user", "--max-depth", "0"])
        assert result.exit_code == 0
        assert "    friends\n" in result.output
        assert "friends {" not in result.output

    def test_truncation_option(self, runner, fetches):
        result = runner.invoke(
            main, ["generate", URL, "query", "user", "--max-depth", "0", "--truncation", "omit"]
        )
        assert result.exit_code == 0
        assert "friends" not in result.output

    def test_writes_files(self, runner, fetches):
        with runner.isolated_filesystem() as directory:
            result = runner.invoke(main, ["generate", URL, "query", "now", "foo", "--write"])

            assert result.exit_code == 0
            assert "Written to NowQuery.ts" in result.output
            assert "Written to FooQuery.ts" in result.output
            with open(f"{directory}/NowQuery.ts") as f:
                assert f.read() == NOW_MODULE

    def test_write_is_all_or_nothing(self, runner, fetches):
        with runner.isolated_filesystem() as directory:
            with open(f"{directory}/FooQuery.ts", "w") as f:
                f.write("// mine")

            result = runner.invoke(main, ["generate", URL, "query", "now", "foo", "--write"])

            assert result.exit_code == 0
            assert "Written to" not in result.output
            assert "Already exists: FooQuery.ts" in result.output
            with open(f"{directory}/FooQuery.ts") as f:
                assert f.read() == "// mine"
            with pytest.raises(FileNotFoundError):
                open(f"{directory}/NowQuery.ts")

    def test_write_skip_existing(self, runner, fetches):
        with runner.isolated_filesystem() as directory:
            with open(f"{directory}/FooQuery.ts", "w") as f:
                f.write("// mine")

            result = runner.invoke(
                main,
                ["generate", URL, "query", "now", "foo", "--write", "--on-conflict", "skip-existing"],
            )

            assert result.exit_code == 0
            assert "Written to NowQuery.ts" in result.output
            assert "Not written: 1 file(s)" in result.output

    def test_output_dir(self, runner, fetches, tmp_path):
        result = runner.invoke(
            main, ["generate", URL, "query", "now", "--write", "--output-dir", str(tmp_path)]
        )
        assert result.exit_code == 0
        assert (tmp_path / "NowQuery.ts").read_text() == NOW_MODULE

    def test_output_dir_must_exist(self, runner, fetches, tmp_path):
        result = runner.invoke(
            main, ["generate", URL, "query", "now", "--write", "--output-dir", str(tmp_path / "missing")]
        )
        assert result.exit_code == 2

    def test_transport_error_fails_run(self, runner, monkeypatch):
        async def fetch_schema(url, timeout=30.0):
            raise TransportError(f"Request to {url} failed")

        monkeypatch.setattr(emitter, "fetch_schema", fetch_schema)
        result = runner.invoke(main, ["generate", URL, "query", "now"])

        assert result.exit_code == 1
        assert f"Error: Request to {URL} failed" in result.output
