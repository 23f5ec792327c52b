"""Unit tests for the show command."""

from pathlib import Path

from trashctl.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


def _show(vault: Path, path: str):
    return runner.invoke(app, ["--vault", str(vault), "show", path])


class TestShow:
    """Tests for trashctl show."""

    def test_markdown_preview(self, vault: Path) -> None:
        """Markdown files are printed as text."""
        (vault / ".trash" / "note.md").write_text("# Groceries\n\n- milk\n")

        result = _show(vault, "note.md")

        assert result.exit_code == 0
        assert "Groceries" in result.output
        assert "milk" in result.output

    def test_plain_text_preview(self, vault: Path) -> None:
        """Text files are printed verbatim."""
        (vault / ".trash" / "todo.txt").write_text("[ ] call back")

        result = _show(vault, "todo.txt")

        assert result.exit_code == 0
        assert "[ ] call back" in result.output

    def test_binary_has_no_preview(self, vault: Path) -> None:
        """Non-text files are described, not printed."""
        (vault / ".trash" / "photo.png").write_bytes(b"\x89PNG")

        result = _show(vault, "photo.png")

        assert result.exit_code == 0
        assert "No text preview for .png files." in result.output

    def test_folder_lists_children(self, vault: Path) -> None:
        """Folders list their direct children."""
        (vault / ".trash" / "proj" / "sub").mkdir(parents=True)
        (vault / ".trash" / "proj" / "a.md").write_text("a")

        result = _show(vault, "proj")

        assert result.exit_code == 0
        assert "sub/" in result.output
        assert "a.md" in result.output

    def test_unknown_entry(self, vault: Path) -> None:
        """Showing a path not in the bin fails."""
        result = _show(vault, "nope.md")
        assert result.exit_code == 1
        assert "Not in recycle bin: nope.md" in result.output

    def test_folder_children_with_brackets(self, vault: Path) -> None:
        """Bracketed names in a folder listing are printed literally."""
        (vault / ".trash" / "drafts [old]").mkdir()
        (vault / ".trash" / "drafts [old]" / "notes [draft].md").write_text("d")

        result = _show(vault, "drafts [old]")

        assert result.exit_code == 0
        assert "drafts [old]" in result.output
        assert "notes [draft].md" in result.output
