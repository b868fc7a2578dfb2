"""Integration tests for CLI commands.

These tests drive the click group end to end: argument parsing, reading the
file, and rendering the rich tables.
"""

from pathlib import Path

from click.testing import CliRunner
import pytest

from csv_matrix.cli import app


@pytest.fixture
def runner(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """Create a CLI runner working in an empty directory."""
    # No stray csv_matrix.toml from the working directory.
    monkeypatch.chdir(tmp_path)
    return CliRunner()


@pytest.mark.integration
class TestInspectCommand:
    """Integration tests for the inspect command."""

    def test_inspect_help(self, runner):
        result = runner.invoke(app, ["inspect", "--help"])

        assert result.exit_code == 0
        assert "elementary type" in result.output
        assert "--row-policy" in result.output
        assert "--header / --no-header" in result.output

    def test_inspect_lists_columns(self, runner, write_csv):
        path = write_csv("name,score\nalice,10\nbob,x\n")

        result = runner.invoke(app, ["inspect", str(path)])

        assert result.exit_code == 0, result.output
        assert "name" in result.output
        assert "score" in result.output
        assert "Numeric" not in result.output
        assert "2 rows x 2 columns" in result.output

    def test_inspect_numeric_column(self, runner, write_csv):
        path = write_csv("name,score\nalice,10\nbob,12.5\n")

        result = runner.invoke(app, ["inspect", str(path)])

        assert result.exit_code == 0, result.output
        assert "Numeric" in result.output
        assert "Text" in result.output

    def test_inspect_without_header(self, runner, write_csv):
        path = write_csv("name,score\nalice,10\n")

        result = runner.invoke(app, ["inspect", str(path), "--no-header"])

        assert result.exit_code == 0, result.output
        assert "2 rows x 2 columns" in result.output

    def test_inspect_empty_file(self, runner, write_csv):
        path = write_csv("")

        result = runner.invoke(app, ["inspect", str(path)])

        assert result.exit_code == 0, result.output
        assert "0 rows x 0 columns" in result.output

    def test_inspect_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["inspect", str(tmp_path / "missing.csv")])

        assert result.exit_code == 2
        assert "does not exist" in result.output

    def test_inspect_malformed_row_fails(self, runner, write_csv):
        path = write_csv("a,b\n1,2\n3\n")

        result = runner.invoke(app, ["inspect", str(path)])

        assert result.exit_code == 1
        assert "Line 3 has 1 fields, expected 2" in result.output

    def test_inspect_pad_policy(self, runner, write_csv):
        path = write_csv("a,b\n1,2\n3\n")

        result = runner.invoke(app, ["inspect", str(path), "--row-policy", "pad"])

        assert result.exit_code == 0, result.output
        assert "Line 3: 1 fields, expected 2 (padded)" in result.output

    def test_inspect_reads_config_file(self, runner, write_csv, tmp_path):
        path = write_csv("a;b\n1;2\n")
        config_file = tmp_path / "custom.toml"
        config_file.write_text('[reader]\ndelimiter = ";"\n')

        result = runner.invoke(
            app, ["inspect", str(path), "--config", str(config_file)]
        )

        assert result.exit_code == 0, result.output
        assert "1 rows x 2 columns" in result.output

    def test_inspect_verbose_stats(self, runner, write_csv):
        path = write_csv("a\n1\n")

        result = runner.invoke(app, ["inspect", str(path), "-v"])

        assert result.exit_code == 0, result.output
        assert "Loaded 1 rows from data.csv" in result.output
        assert "Ingestion Statistics" in result.output

    def test_inspect_bracketed_header_with_debug_output(self, runner, write_csv):
        path = write_csv("[/b],[red]\n1,2\n")

        result = runner.invoke(app, ["inspect", str(path), "-vv"])

        assert result.exit_code == 0, result.output
        assert "Header: [/b], [red]" in result.output
        assert "1 rows x 2 columns" in result.output


@pytest.mark.integration
class TestPreviewCommand:
    """Integration tests for the preview command."""

    def test_preview_prints_converted_values(self, runner, write_csv):
        path = write_csv("name,score\nalice,10\nbob,12.5\n")

        result = runner.invoke(app, ["preview", str(path)])

        assert result.exit_code == 0, result.output
        assert "alice" in result.output
        assert "10.0" in result.output
        assert "12.5" in result.output

    def test_preview_limits_rows(self, runner, write_csv):
        path = write_csv("n\n111\n222\n333\n")

        result = runner.invoke(app, ["preview", str(path), "--rows", "2"])

        assert result.exit_code == 0, result.output
        assert "111.0" in result.output
        assert "222.0" in result.output
        assert "333.0" not in result.output

    def test_preview_conversion_error(self, runner, write_csv):
        path = write_csv("a,b\n1,x\n,y\n")

        result = runner.invoke(app, ["preview", str(path)])

        assert result.exit_code == 1
        assert "Cannot convert" in result.output

    def test_preview_empty_as_nan(self, runner, write_csv):
        path = write_csv("a,b\n1,x\n,y\n")

        result = runner.invoke(app, ["preview", str(path), "--empty-as-nan"])

        assert result.exit_code == 0, result.output
        assert "nan" in result.output

    def test_preview_header_only(self, runner, write_csv):
        path = write_csv("a,b\n")

        result = runner.invoke(app, ["preview", str(path)])

        assert result.exit_code == 0, result.output
        assert "No data rows" in result.output
