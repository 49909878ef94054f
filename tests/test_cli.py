import pytest
from typer.testing import CliRunner

from kedgify.cli.cli import app

pytestmark = pytest.mark.tier2

runner = CliRunner()


@pytest.fixture
def manifests(tmp_path):
    d = tmp_path / "manifests"
    d.mkdir()
    (d / "a.yml").write_bytes(b"---\nname: a\n---\nname: b\n")
    (d / "c.yaml").write_bytes(b"name: c")
    return d


# ---------------------------------------------------------
# Smoke test: CLI loads
# ---------------------------------------------------------
def test_cli_root_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Kedgify" in result.stdout


def test_all_commands_help():
    for cmd in app.registered_commands:
        result = runner.invoke(app, [cmd.name, "--help"])
        assert result.exit_code == 0, f"Help failed for '{cmd.name}'"


# ---------------------------------------------------------
# files
# ---------------------------------------------------------
def test_files_lists_resolved_paths(manifests):
    result = runner.invoke(app, ["files", str(manifests)])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [str(manifests / "a.yml"), str(manifests / "c.yaml")]


def test_files_missing_path_exits_nonzero(tmp_path):
    result = runner.invoke(app, ["files", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "can't get file info" in result.output


def test_files_empty_directory_exits_nonzero(tmp_path):
    result = runner.invoke(app, ["files", str(tmp_path)])

    assert result.exit_code == 1
    assert "no manifest files were found" in result.output


# ---------------------------------------------------------
# split
# ---------------------------------------------------------
def test_split_prints_separated_documents(manifests):
    result = runner.invoke(app, ["split", str(manifests)])

    assert result.exit_code == 0
    assert result.stdout.endswith("name: a\n---\nname: b\n---\nname: c\n")


def test_split_summary(manifests):
    result = runner.invoke(app, ["split", "--summary", str(manifests)])

    assert result.exit_code == 0
    assert "3 document(s)" in result.stdout


def test_config_patterns_are_used(manifests, tmp_path):
    cfg = tmp_path / "kedgify.yaml"
    cfg.write_text("resolver:\n  patterns: ['*.yaml']\n", encoding="utf-8")

    result = runner.invoke(app, ["--config", str(cfg), "files", str(manifests)])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [str(manifests / "c.yaml")]


def test_missing_config_file_exits_nonzero(manifests, tmp_path):
    result = runner.invoke(app, ["--config", str(tmp_path / "nope.yaml"), "files", str(manifests)])

    assert result.exit_code == 1
    assert "config file not found" in result.output
