import io
import json
from pathlib import Path

import pytest

import main as root_main
from unbundler import main as cli_main


@pytest.fixture
def bundle_file(tmp_path: Path, sample_bundle) -> Path:
    target = tmp_path / "bundle.js"
    target.write_text(sample_bundle, encoding="utf-8")
    return target


def test_cli_writes_modules(tmp_path: Path, bundle_file: Path, capsys) -> None:
    out = tmp_path / "out"

    exit_code = cli_main.main(["-i", str(bundle_file), "-o", str(out)])

    captured = capsys.readouterr().out
    assert exit_code == 0
    assert f"Reading modules from {bundle_file}..." in captured
    assert "Found 3 modules." in captured
    assert f"Successfully wrote module to {out / 'Foo.js'}" in captured
    assert (out / "module-1.js").read_text(encoding="utf-8") == "exports.helper = 1;\n\n"


def test_cli_reads_piped_stdin(tmp_path: Path, sample_bundle, capsys) -> None:
    out = tmp_path / "out"

    exit_code = cli_main.main(["--out", str(out)], stdin=io.StringIO(sample_bundle))

    assert exit_code == 0
    assert "Reading standard input..." in capsys.readouterr().out
    assert (out / "main.js").exists()


def test_cli_defaults_to_current_directory(tmp_path: Path, bundle_file: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert cli_main.main(["-i", str(bundle_file)]) == 0
    assert (tmp_path / "Foo.js").exists()


def test_cli_missing_input(tty_stdin, capsys) -> None:
    exit_code = cli_main.main([], stdin=tty_stdin)

    assert exit_code == 1
    assert "Error: Missing input path!" in capsys.readouterr().out


def test_cli_without_wrapper(tmp_path: Path, capsys) -> None:
    target = tmp_path / "plain.js"
    target.write_text("var a = 1;", encoding="utf-8")

    exit_code = cli_main.main(["-i", str(target), "-o", str(tmp_path / "out")])

    assert exit_code == 1
    assert "Error: Could not find a Webpack wrapper!" in capsys.readouterr().out
    assert not (tmp_path / "out").exists()


def test_cli_parse_error(tmp_path: Path, capsys) -> None:
    target = tmp_path / "broken.js"
    target.write_text("function (", encoding="utf-8")

    assert cli_main.main(["-i", str(target)]) == 2
    assert "Error: failed to parse bundle" in capsys.readouterr().out


def test_cli_list_and_report(tmp_path: Path, bundle_file: Path, capsys) -> None:
    out = tmp_path / "out"
    report_path = tmp_path / "report.json"

    exit_code = cli_main.main(["-i", str(bundle_file), "-o", str(out), "--list", "--report-json", str(report_path)])

    captured = capsys.readouterr().out
    assert exit_code == 0
    assert "0\tmain" in captured
    assert "2\tFoo" in captured
    assert not out.exists()
    report = json.loads(report_path.read_text(encoding="utf-8"))
    assert [module["name"] for module in report["modules"]] == ["main", "module-1", "Foo"]
    assert report["wrapper_found"] is True


def test_cli_write_failure_sets_exit_code(tmp_path: Path, capsys) -> None:
    target = tmp_path / "bundle.js"
    target.write_text("(function (m) {})([function (e) { e.exports = '../../escape'; }]);", encoding="utf-8")

    exit_code = cli_main.main(["-i", str(target), "-o", str(tmp_path / "out")])

    assert exit_code == 1
    assert "Error writing" in capsys.readouterr().out


def test_rerunning_on_output_finds_no_wrapper(tmp_path: Path, bundle_file: Path) -> None:
    out = tmp_path / "out"
    assert cli_main.main(["-i", str(bundle_file), "-o", str(out)]) == 0

    for module in out.iterdir():
        assert cli_main.main(["-i", str(module), "--list"]) == 1


def test_root_shim_forwards_arguments(tmp_path: Path, bundle_file: Path) -> None:
    assert root_main.main(["-i", str(bundle_file), "-o", str(tmp_path / "shim")]) == 0
    assert (tmp_path / "shim" / "Foo.js").exists()


def test_log_file_receives_debug_records(tmp_path: Path, bundle_file: Path) -> None:
    log_file = tmp_path / "logs" / "run.log"

    cli_main.main(["-i", str(bundle_file), "--list", "--log-file", str(log_file)])

    assert "unpacked 3 modules" in log_file.read_text(encoding="utf-8")


def test_console_colours_only_when_enabled() -> None:
    plain = io.StringIO()
    coloured = io.StringIO()

    cli_main._Console(plain, colour=False).write("Found 1 modules.", "green")
    cli_main._Console(coloured, colour=True).write("Found 1 modules.", "green")

    assert plain.getvalue() == "Found 1 modules.\n"
    assert coloured.getvalue() == "\x1b[32mFound 1 modules.\x1b[0m\n"
