import json
import subprocess
import sys
from pathlib import Path

import cli

ROOT = Path(__file__).resolve().parents[1]


def test_cli_new_paint_expand_summary(tmp_path, capsys):
    path = str(tmp_path / "map.json")
    assert cli.main(["new", "--width", "20", "--height", "20", "--out", path]) == 0
    assert cli.main(["paint", path, "9", "0", "plains"]) == 0
    out = capsys.readouterr().out
    assert "Map grew to 25x25" in out
    assert cli.main(["paint", path, "-2", "-3", "water"]) == 0
    assert cli.main(["erase", path, "9", "0"]) == 0
    assert cli.main(["expand", path, "--north", "5", "--east", "3", "--west", "3"]) == 0
    capsys.readouterr()
    assert cli.main(["summary", path]) == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["width"] == 31
    assert summary["height"] == 30
    assert summary["terrain"] == {"water": 1}


def test_cli_errors_return_nonzero(tmp_path, capsys):
    path = str(tmp_path / "map.json")
    cli.main(["new", "--out", path])
    assert cli.main(["paint", path, "0", "0", "lava"]) == 1
    assert cli.main(["expand", path, "--north", "-1"]) == 1
    assert cli.main(["summary", str(tmp_path / "nope.json")]) == 1
    err = capsys.readouterr().err
    assert err.count("error:") == 3


def test_cli_terrains_lists_catalog(capsys):
    assert cli.main(["terrains"]) == 0
    out = capsys.readouterr().out
    assert "plains" in out and "swamp" in out
    assert len(out.strip().splitlines()) == 13


def test_cli_export_writes_image(tmp_path):
    world = tmp_path / "map.json"
    png = tmp_path / "map.png"
    cli.main(["new", "--width", "6", "--height", "6", "--out", str(world)])
    cmd = [sys.executable, "cli.py", "export", "--map", str(world), "--png", str(png),
           "--hex-size", "12"]
    subprocess.run(cmd, check=True, cwd=ROOT)
    assert png.exists()
