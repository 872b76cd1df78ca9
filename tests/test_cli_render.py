from pathlib import Path

from typer.testing import CliRunner

from modlogpack.cli.app import app


def test_cli_render_prints_html_preview(tmp_path: Path) -> None:
    markup = tmp_path / "CHANGELOG.md"
    markup.write_text("## Added (1)\n\n- **<b>Bar</b>** `1.0`\n\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["render", str(markup)])

    assert result.exit_code == 0
    assert result.stdout == (
        "<h2>Added (1)</h2><p></p>"
        "<ul><li><strong>&lt;b&gt;Bar&lt;/b&gt;</strong> `1.0`</li></ul>"
        "<p></p><p></p>\n"
    )


def test_cli_render_reads_stdin() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["render", "-"], input="No changes detected.\n")

    assert result.exit_code == 0
    assert result.stdout == "<p>No changes detected.</p><p></p>\n"


def test_cli_render_non_zero_on_missing_file() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["render", "missing-changelog.md"])

    assert result.exit_code == 1
    assert "render failed" in result.output
