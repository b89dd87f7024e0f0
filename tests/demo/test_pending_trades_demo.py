"""
Smoke test for scripts/demo_pending_trades.py.

Loads the script as a module and runs ``main`` with explicit argv, checking
the JSON written to stdout.

Run with:
    python -m pytest tests/demo/test_pending_trades_demo.py -v
"""

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "demo_pending_trades.py"


@pytest.fixture(scope="module")
def demo():
    spec = importlib.util.spec_from_file_location("demo_pending_trades", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _rows(response: dict) -> list:
    table = response["ui"]["modal"]["content"][0]["children"][1]
    return table["props"]["data"]["rows"]


class TestDemoScript:

    def test_default_run(self, demo, capsys):
        assert demo.main([]) == 0
        response = json.loads(capsys.readouterr().out)
        assert [row[0] for row in _rows(response)] == [50001.0, 50002.0, 50003.0]

    def test_group_mask(self, demo, capsys):
        demo.main(["--group", "real*"])
        response = json.loads(capsys.readouterr().out)
        assert [row[2] for row in _rows(response)] == ["Alice Trader", "Bruno Rossi"]

    def test_pretty_output(self, demo, capsys):
        demo.main(["--pretty"])
        out = capsys.readouterr().out
        assert out.startswith("{\n")
        assert json.loads(out)["ui"]["modal"]["size"] == "xxxl"

    def test_yaml_config(self, demo, capsys):
        demo.main(["--config", str(SCRIPT.parent / "pending_trades.yaml")])
        response = json.loads(capsys.readouterr().out)
        # Europe/Cyprus is UTC+2 in January
        assert _rows(response)[0][3] == "2025.01.01 03:00:00"

    def test_empty_window(self, demo, capsys):
        demo.main(["--from", "1", "--to", "2"])
        response = json.loads(capsys.readouterr().out)
        assert _rows(response) == []
