"""Tests for the idiom-catalog CLI commands."""

from pathlib import Path

from typer.testing import CliRunner

from idiom_catalog.cli.main import app

runner = CliRunner()

# __file__ is tests/cli/test_main.py; parent.parent is the tests/ directory
FIXTURES = Path(__file__).parent.parent / "fixtures"


class TestCatalogsCommand:
    def test_lists_bundled_catalogs(self) -> None:
        result = runner.invoke(app, ["catalogs"])

        assert result.exit_code == 0
        assert "walkthrough (default)" in result.output
        assert "cheatsheet" in result.output


class TestListCommand:
    def test_lists_topics_of_default_catalog(self) -> None:
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "data_frame_basics" in result.output
        assert "filter_between" in result.output

    def test_lists_topics_from_catalog_path(self) -> None:
        result = runner.invoke(
            app, ["list", "--catalog-path", str(FIXTURES / "valid_catalog.yaml")]
        )

        assert result.exit_code == 0
        assert "Fixture catalog" in result.output
        assert "arrange" in result.output

    def test_unknown_catalog_exits_with_error(self) -> None:
        result = runner.invoke(app, ["list", "--catalog", "tutorial"])

        assert result.exit_code == 1
        assert "Failed to find bundled catalog 'tutorial'" in result.output


class TestShowCommand:
    def test_shows_one_topic(self) -> None:
        result = runner.invoke(app, ["show", "filter_between", "--catalog", "cheatsheet"])

        assert result.exit_code == 0
        assert "mtcars %>% filter(between(mpg, 20, 25))" in result.output

    def test_unknown_topic_exits_with_error(self) -> None:
        result = runner.invoke(app, ["show", "nonexistent_topic"])

        assert result.exit_code == 1
        assert "Failed to find topic 'nonexistent_topic'" in result.output


class TestRenderCommand:
    def test_renders_markup_to_stdout(self) -> None:
        result = runner.invoke(app, ["render", "--format", "markup"])

        assert result.exit_code == 0
        assert "# Base R vs Tidy R: a walkthrough with mtcars" in result.output
        assert "```r" in result.output

    def test_renders_to_output_file(self, tmp_path: Path) -> None:
        output = tmp_path / "out" / "catalog.txt"
        result = runner.invoke(
            app,
            [
                "render",
                "--catalog-path",
                str(FIXTURES / "valid_catalog.yaml"),
                "--output",
                str(output),
            ],
        )

        assert result.exit_code == 0
        text = output.read_text(encoding="utf-8")
        assert text.startswith("Fixture catalog\n")
        assert "[arrange] arrange" in text

    def test_unknown_format_exits_with_error(self) -> None:
        result = runner.invoke(app, ["render", "--format", "html"])

        assert result.exit_code == 1
        assert "unsupported format 'html'" in result.output

    def test_invalid_catalog_file_exits_with_error(self) -> None:
        result = runner.invoke(
            app,
            ["render", "--catalog-path", str(FIXTURES / "duplicate_names_catalog.yaml")],
        )

        assert result.exit_code == 1
        assert "Failed to validate catalog" in result.output

    def test_directory_catalog_path_exits_with_error(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", "--catalog-path", str(tmp_path)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, OSError)
        assert "Failed to load catalog" in result.output

    def test_non_utf8_catalog_exits_with_error(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1_catalog.yaml"
        path.write_bytes(b"\xff\xfename: broken\n")

        result = runner.invoke(app, ["list", "--catalog-path", str(path)])

        assert result.exit_code == 1
        assert "not valid UTF-8" in result.output

    def test_invalid_log_format_exits_with_error(self) -> None:
        result = runner.invoke(app, ["render", "--log-format", "xml"])

        assert result.exit_code == 1
