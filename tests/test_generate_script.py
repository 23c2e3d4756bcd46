"""Tests for the forest generation batch script."""

import json
import sys

import generate_forest as script
from py_forestgen.core import ForestConfig, generate_forest


class TestGenerateScript:
    """Test command line generation."""

    def test_writes_forest(self, monkeypatch, tmp_path, capsys):
        output = tmp_path / "forest.json"
        monkeypatch.setattr(sys, "argv", [
            "generate_forest.py",
            "--width", "24",
            "--height", "18",
            "--border-size", "2",
            "--seed", "cli",
            "--patches", "3",
            "--smoothening", "2",
            "--markers",
            "--output", str(output),
        ])

        assert script.main() == 0
        assert "seed cli" in capsys.readouterr().out

        with open(output, encoding="utf-8") as f:
            data = json.load(f)
        expected = generate_forest(ForestConfig(
            width=24, height=18, border_size=2, seed="cli", num_patches=3,
            smoothening_iterations=2,
        ))

        assert data["width"] == 28
        assert data["height"] == 22
        assert data["seed"] == "cli"
        assert len(data["patch_centers"]) == 3
        assert data["start"] == list(expected.start)
        assert data["cells"] == expected.marked_cells().tolist()

    def test_generation_failure(self, monkeypatch, tmp_path):
        output = tmp_path / "forest.json"
        monkeypatch.setattr(sys, "argv", [
            "generate_forest.py",
            "--width", "8",
            "--height", "8",
            "--checkpoint-offset", "1",
            "--patches", "1",
            "--patch-radius", "20",
            "--output", str(output),
        ])

        assert script.main() == 1
        assert not output.exists()

    def test_invalid_config(self, monkeypatch, tmp_path):
        monkeypatch.setattr(sys, "argv", [
            "generate_forest.py",
            "--width", "0",
            "--output", str(tmp_path / "forest.json"),
        ])

        assert script.main() == 1
