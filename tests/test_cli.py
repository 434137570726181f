import json

import pytest
from typer.testing import CliRunner

from iconworks.cli import app

runner = CliRunner()

BOX_ICONS = """\
- name: [Box, Crate]
  colors: [Blue, {ansi: 208}]
  width: 5
  art: |
    ${c0}+-${c1}-${c0}+
    ${c0}|  |
"""


@pytest.fixture
def box_icons(write_icons):
    return write_icons(BOX_ICONS)


def test_size_with_explicit_precision():
    res = runner.invoke(app, ["size", "1536", "--precision", "1"])

    assert res.exit_code == 0, res.output
    assert res.stdout.strip() == "1.5 KiB"


def test_size_uses_configured_default_precision(monkeypatch):
    monkeypatch.setenv("ICONWORKS__DEFAULT_PRECISION", "2")

    res = runner.invoke(app, ["size", "1048576"])

    assert res.exit_code == 0, res.output
    assert res.stdout.strip() == "1.00 MiB"


def test_size_out_of_range():
    res = runner.invoke(app, ["size", str(1024**7), "-p", "0"])

    assert res.exit_code == 1
    assert "outside" in res.output


def test_size_rejects_negative_input():
    res = runner.invoke(app, ["size", "--", "-5"])

    assert res.exit_code == 2


def test_icons_lists_bundled_catalog():
    res = runner.invoke(app, ["icons"])

    assert res.exit_code == 0, res.output
    assert "Icons" in res.stdout
    assert "tux" in res.stdout


def test_show_json(box_icons):
    res = runner.invoke(app, ["--icons-path", str(box_icons), "show", "CRATE", "--json"])

    assert res.exit_code == 0, res.output
    data = json.loads(res.stdout)
    assert data["names"] == ["box", "crate"]
    assert data["colors"] == ["blue", {"ansi": 208}]
    assert data["height"] == 2
    assert data["segments"] == [
        {"color": 0, "text": "+-"},
        {"color": 1, "text": "-"},
        {"color": 0, "text": "+\n"},
        {"color": 0, "text": "|  |\n"},
    ]


def test_show_table(box_icons):
    res = runner.invoke(app, ["--icons-path", str(box_icons), "show", "box"])

    assert res.exit_code == 0, res.output
    assert "box, crate: 5x2, 4 segments" in res.stdout
    assert "ansi(208)" in res.stdout


def test_show_unknown_icon():
    res = runner.invoke(app, ["show", "nope"])

    assert res.exit_code == 1
    assert "Could not find an icon for nope" in res.output


def test_show_reports_broken_catalog(write_icons):
    path = write_icons("- name: [x]\n  colors: []\n  width: 1\n  art: '${c999}'\n")

    res = runner.invoke(app, ["--icons-path", str(path), "show", "x"])

    assert res.exit_code == 1
    assert "index must be 0-255" in res.output


def test_scheme_json():
    res = runner.invoke(app, ["scheme", "pan", "--json"])

    assert res.exit_code == 0, res.output
    assert json.loads(res.stdout) == [[255, 33, 140], [255, 216, 0], [33, 177, 255]]


def test_scheme_from_custom_file(tmp_path):
    flags = tmp_path / "flags.toml"
    flags.write_text("mono = [[0, 0, 0], [255, 255, 255]]\n")

    res = runner.invoke(app, ["--flags-path", str(flags), "scheme", "mono"])

    assert res.exit_code == 0, res.output
    assert "#ffffff" in res.stdout


def test_unknown_scheme():
    res = runner.invoke(app, ["scheme", "plaid"])

    assert res.exit_code == 1
    assert "Failed to find scheme plaid" in res.output


def test_schemes_lists_bundled_schemes():
    res = runner.invoke(app, ["schemes"])

    assert res.exit_code == 0, res.output
    for name in ("pride", "trans", "bi"):
        assert name in res.stdout


def test_cli_writes_log_file(tmp_path):
    res = runner.invoke(app, ["size", "0", "-p", "0"])

    assert res.exit_code == 0, res.output
    assert (tmp_path / "logs" / "iconworks.log").exists()


def test_icons_reports_record_with_bad_name(write_icons):
    path = write_icons("- name: 42\n  colors: []\n  width: 1\n  art: 'x'\n")

    res = runner.invoke(app, ["--icons-path", str(path), "icons"])

    assert res.exit_code == 1
    assert "must be a list of strings" in res.output


def test_commands_survive_a_malformed_tool_table(tmp_path, monkeypatch):
    (tmp_path / "pyproject.toml").write_text("tool = 1\n")
    monkeypatch.chdir(tmp_path)

    res = runner.invoke(app, ["size", "2048", "-p", "0"])

    assert res.exit_code == 0, res.output
    assert res.stdout.strip() == "2 KiB"
