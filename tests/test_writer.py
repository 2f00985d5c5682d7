from pathlib import Path

from unbundler.io.writer import module_path, replace_file, write_module


def test_module_path_appends_suffix(tmp_path: Path) -> None:
    assert module_path(tmp_path, "Foo") == tmp_path / "Foo.js"
    assert module_path(tmp_path, "lib/util") == tmp_path / "lib" / "util.js"


def test_write_module_creates_parent_directories(tmp_path: Path) -> None:
    result = write_module(tmp_path / "out", "lib/util", "x;\n")

    assert result.success
    assert result.error is None
    assert (tmp_path / "out" / "lib" / "util.js").read_text(encoding="utf-8") == "x;\n"


def test_write_module_refuses_paths_outside_output(tmp_path: Path) -> None:
    out = tmp_path / "out"
    out.mkdir()

    result = write_module(out, "../escape", "x;\n")

    assert not result.success
    assert "escapes" in result.error
    assert not (tmp_path / "escape.js").exists()


def test_write_module_reports_os_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    result = write_module(tmp_path, "blocker/inner", "x;\n")

    assert not result.success
    assert result.error


def test_replace_file_leaves_no_staging_files(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "report.json"

    replace_file(target, "first\n")
    replace_file(target, "second\n")

    assert target.read_text(encoding="utf-8") == "second\n"
    assert [path.name for path in target.parent.iterdir()] == ["report.json"]
