"""Tests for opening files from the command line."""

from red.constants import EditorConstants


def test_no_file_uses_empty_document_and_help(make_editor):
    editor = make_editor(width=80, height=24)

    assert editor.document.line_count == 0
    assert editor.status_message.text == EditorConstants.HELP_MESSAGE

    editor.refresh_screen()
    assert editor.terminal.screen_lines[8].startswith("~ ")


def test_missing_file_falls_back_to_empty_document(make_editor, tmp_path, clock):
    editor = make_editor()
    missing = str(tmp_path / "missing.txt")
    clock.advance(1)

    editor.load_file(missing)

    assert editor.document.line_count == 0
    assert editor.document.file_name is None
    assert editor.status_message.text == f"ERR: Could not open file: {missing}"
    assert "missing.txt" in editor.status_message.text
    assert editor.status_message.created_at == clock.now


def test_existing_file_is_loaded(make_editor, tmp_path):
    path = tmp_path / "poem.txt"
    path.write_text("roses\nviolets\n\nsugar\n", encoding="utf-8")
    editor = make_editor()

    editor.load_file(str(path))

    assert editor.document.line_count == 4
    assert editor.document.line_at(1).text == "violets"
    assert editor.document.file_name == str(path)
    assert editor.status_message.text == EditorConstants.HELP_MESSAGE


def test_directory_cannot_be_opened(make_editor, tmp_path):
    editor = make_editor()

    editor.load_file(str(tmp_path))

    assert editor.document.is_empty()
    assert editor.status_message.text.startswith("ERR: Could not open file:")


def test_binary_file_cannot_be_opened(make_editor, tmp_path):
    path = tmp_path / "blob.bin"
    path.write_bytes(b"\xff\xfe\x00\x81")
    editor = make_editor()

    editor.load_file(str(path))

    assert editor.document.is_empty()
    assert str(path) in editor.status_message.text
