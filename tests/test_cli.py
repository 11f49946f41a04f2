"""
Test the command-line interface end to end.
"""

import json
from pathlib import Path

import pytest

from zome_scaffold_generator.cli import (
    EXIT_FILE_NOT_FOUND,
    EXIT_GENERATION_ERROR,
    EXIT_INVALID_DEFINITION,
    EXIT_INVALID_JSON,
    EXIT_SUCCESS,
    main,
)


@pytest.fixture
def definition_file(tmp_path: Path) -> Path:
    path = tmp_path / "zome.json"
    path.write_text(
        json.dumps(
            {
                "name": "posts_integrity",
                "entry_defs": [
                    {"typeDefinition": {"name": "post", "fields": [{"name": "title", "type": "String"}]}},
                    {"typeDefinition": {"name": "comment"}},
                ],
            }
        ),
        encoding="utf-8",
    )
    return path


class TestCli:
    def test_generates_crate(self, definition_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        output_dir = tmp_path / "out"

        assert main([str(definition_file), "--output", str(output_dir)]) == EXIT_SUCCESS

        assert (output_dir / "Cargo.toml").is_file()
        assert (output_dir / "src" / "post.rs").is_file()
        assert (output_dir / "src" / "comment.rs").is_file()
        lib_rs = (output_dir / "src" / "lib.rs").read_text(encoding="utf-8")
        assert "Post(Post)," in lib_rs
        assert "generated successfully" in capsys.readouterr().out

    def test_verbose_summary(self, definition_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        output_dir = tmp_path / "out"

        assert main([str(definition_file), "-o", str(output_dir), "-v"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert "Parsed zome 'posts_integrity' with 2 entry types" in out
        assert "Generated 4 files:" in out

    def test_replaces_previous_output(self, definition_file: Path, tmp_path: Path) -> None:
        output_dir = tmp_path / "out"
        output_dir.mkdir()
        (output_dir / "stale.rs").write_text("// stale", encoding="utf-8")

        assert main([str(definition_file), "-o", str(output_dir)]) == EXIT_SUCCESS
        assert not (output_dir / "stale.rs").exists()

    def test_missing_definition_file(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "missing.json")]) == EXIT_FILE_NOT_FOUND

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "zome.json"
        path.write_text("{not json", encoding="utf-8")

        assert main([str(path), "-o", str(tmp_path / "out")]) == EXIT_INVALID_JSON

    def test_invalid_entry_name_leaves_output_untouched(self, tmp_path: Path) -> None:
        path = tmp_path / "zome.json"
        path.write_text(json.dumps({"name": "z", "entry_defs": [{"typeDefinition": {"name": "type"}}]}), encoding="utf-8")
        output_dir = tmp_path / "out"
        output_dir.mkdir()
        (output_dir / "keep.rs").write_text("// keep", encoding="utf-8")

        assert main([str(path), "-o", str(output_dir)]) == EXIT_INVALID_DEFINITION
        assert (output_dir / "keep.rs").exists()

    def test_no_validate_allows_reserved_names(self, tmp_path: Path) -> None:
        path = tmp_path / "zome.json"
        path.write_text(json.dumps({"name": "z", "entry_defs": [{"typeDefinition": {"name": "type"}}]}), encoding="utf-8")

        assert main([str(path), "-o", str(tmp_path / "out"), "--no-validate"]) == EXIT_SUCCESS

    def test_template_failure_leaves_output_untouched(self, definition_file: Path, tmp_path: Path) -> None:
        output_dir = tmp_path / "out"
        output_dir.mkdir()
        (output_dir / "keep.rs").write_text("// keep", encoding="utf-8")
        empty_templates = tmp_path / "templates"
        empty_templates.mkdir()

        code = main([str(definition_file), "-o", str(output_dir), "--template-dir", str(empty_templates)])

        assert code == EXIT_GENERATION_ERROR
        assert (output_dir / "keep.rs").read_text(encoding="utf-8") == "// keep"

    def test_definition_not_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "zome.json"
        path.write_bytes(b'{"name": "\xff\xfe"}')

        assert main([str(path), "-o", str(tmp_path / "out")]) == EXIT_INVALID_JSON

    def test_definition_path_is_directory(self, tmp_path: Path) -> None:
        assert main([str(tmp_path), "-o", str(tmp_path / "out")]) == EXIT_FILE_NOT_FOUND

    def test_entry_named_lib_is_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "zome.json"
        path.write_text(json.dumps({"name": "z", "entry_defs": [{"typeDefinition": {"name": "lib"}}]}), encoding="utf-8")
        output_dir = tmp_path / "out"

        assert main([str(path), "-o", str(output_dir)]) == EXIT_INVALID_DEFINITION
        assert main([str(path), "-o", str(output_dir), "--no-validate"]) == EXIT_INVALID_DEFINITION
        assert not (output_dir / "src" / "lib.rs").exists()
