"""Unit tests for the ls command."""

import json
from pathlib import Path

from trashctl.cli.commands.ls import _format_entry_row
from trashctl.cli.main import app
from trashctl.storage.base import FileStat
from trashctl.trash.entries import MS_PER_DAY, TrashFile, TrashFolder
from typer.testing import CliRunner

runner = CliRunner()


def _ls(vault: Path, *args: str):
    return runner.invoke(app, ["--vault", str(vault), "ls", *args])


class TestLs:
    """Tests for trashctl ls."""

    def test_empty_bin(self, vault: Path) -> None:
        """An empty trash folder is reported as empty."""
        result = _ls(vault)
        assert result.exit_code == 0
        assert "Recycle bin is empty." in result.output

    def test_missing_trash_folder_is_empty(self, tmp_path: Path) -> None:
        """A vault without a trash folder has an empty bin."""
        result = _ls(tmp_path)
        assert result.exit_code == 0
        assert "Recycle bin is empty." in result.output

    def test_table_and_summary(self, vault: Path) -> None:
        """Entries are listed with a count and size summary."""
        (vault / ".trash" / "notes").mkdir()
        (vault / ".trash" / "notes" / "todo.md").write_text("x" * 100)
        (vault / ".trash" / "a.md").write_text("y" * 20)

        result = _ls(vault)

        assert result.exit_code == 0
        assert "a.md" in result.output
        assert "notes/" in result.output
        assert "3 items, 120 B total" in result.output

    def test_json_top_level(self, vault: Path) -> None:
        """JSON output lists top-level entries with their metadata."""
        (vault / ".trash" / "notes").mkdir()
        (vault / ".trash" / "notes" / "todo.md").write_text("hello")

        result = _ls(vault, "--format", "json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert len(data) == 1
        assert data[0]["name"] == "notes"
        assert data[0]["kind"] == "folder"
        assert data[0]["original_path"] == "notes"
        assert data[0]["size"] == 5
        assert "extension" not in data[0]

    def test_json_flat_sorted_by_name(self, vault: Path) -> None:
        """--flat includes nested entries; --sort name orders them."""
        (vault / ".trash" / "notes").mkdir()
        (vault / ".trash" / "notes" / "b.md").write_text("b")
        (vault / ".trash" / "A.txt").write_text("a")

        result = _ls(vault, "--flat", "--sort", "name", "--order", "asc", "-f", "json")

        assert result.exit_code == 0
        names = [item["name"] for item in json.loads(result.output)]
        assert names == ["A.txt", "b.md", "notes"]

    def test_search_spans_all_depths(self, vault: Path) -> None:
        """Search matches names inside trashed folders, ignoring case."""
        (vault / ".trash" / "work").mkdir()
        (vault / ".trash" / "work" / "Report.md").write_text("r")
        (vault / ".trash" / "summary.txt").write_text("s")

        result = _ls(vault, "-s", "report", "-f", "json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [item["original_path"] for item in data] == ["work/Report.md"]
        assert data[0]["extension"] == "md"

    def test_search_without_match(self, vault: Path) -> None:
        """A search with no hits says so."""
        (vault / ".trash" / "a.md").write_text("a")
        result = _ls(vault, "-s", "zzz")
        assert result.exit_code == 0
        assert "No entries match 'zzz'." in result.output

    def test_trash_folder_override(self, vault: Path) -> None:
        """--trash-folder lists another folder."""
        (vault / "_bin").mkdir()
        (vault / "_bin" / "x.md").write_text("x")

        result = runner.invoke(
            app, ["--vault", str(vault), "--trash-folder", "_bin", "ls", "-f", "json"]
        )

        assert result.exit_code == 0
        assert [item["path"] for item in json.loads(result.output)] == ["_bin/x.md"]

    def test_bracketed_names_printed_literally(self, vault: Path) -> None:
        """Names containing square brackets are not parsed as markup."""
        (vault / ".trash" / "notes [draft].md").write_text("d")
        (vault / ".trash" / "[bold]x").mkdir()
        (vault / ".trash" / "[bold]x" / "a.md").write_text("a")

        result = _ls(vault)

        assert result.exit_code == 0
        assert "notes [draft].md" in result.output
        assert "[bold]x/" in result.output


class TestFormatEntryRow:
    """Tests for table row formatting."""

    NOW = 1_000 * MS_PER_DAY

    def _file(self, storage, name: str, days: int) -> TrashFile:
        stat = FileStat(size=1, mtime=self.NOW - days * MS_PER_DAY)
        return TrashFile(storage, f".trash/{name}", ".trash", stat)

    def test_age_colored_by_purge_threshold(self, storage) -> None:
        """The Deleted column is colored by closeness to the purge threshold."""
        recent = _format_entry_row(self._file(storage, "a.md", 3), 30, self.NOW)
        old = _format_entry_row(self._file(storage, "b.md", 20), 30, self.NOW)
        expired = _format_entry_row(self._file(storage, "c.md", 31), 30, self.NOW)

        assert recent[4].startswith("[age_recent]")
        assert old[4].startswith("[age_old]")
        assert expired[4].startswith("[age_expired]")

    def test_markup_in_names_escaped(self, storage) -> None:
        """Entry names and original paths are escaped."""
        folder = TrashFolder(storage, ".trash/[red]", ".trash")
        entry = self._file(storage, "[red]/b [x].md", 1)
        folder.add_child(entry)

        _icon, name, original_path, _size, _age = _format_entry_row(entry, 30, self.NOW)

        assert name == "[file]b \\[x].md[/]"
        assert original_path == "\\[red]/b \\[x].md"
        assert _format_entry_row(folder, 30, self.NOW)[1] == "[folder]\\[red]/[/]"
