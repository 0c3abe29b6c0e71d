"""
Tests for the create_guide command line entry point.
"""
import json

import pytest

import create_guide
from config_loader import CONFIG_ENV_VAR
from tests.conftest import article, wrap_page


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestMain:
    """Tests for create_guide.main."""

    def test_converts_with_flags(self, use_let_page, write_page, tmp_path, capsys):
        source = write_page(use_let_page)
        target = tmp_path / "guide.md"
        create_guide.main(
            ["--input-html", str(source), "--output", str(target)]
        )
        assert target.read_text(encoding="utf-8").startswith("### Use let\n")
        out = capsys.readouterr().out
        assert "✅ Guide written" in out
        assert "Converted 1 articles" in out

    def test_language_flag(self, use_let_page, write_page, tmp_path):
        source = write_page(use_let_page)
        target = tmp_path / "guide.md"
        create_guide.main(
            ["--input-html", str(source), "--output", str(target),
             "--language", "rb"]
        )
        assert "```rb\n" in target.read_text(encoding="utf-8")

    def test_uses_config_file(self, use_let_page, write_page, tmp_path):
        write_page(use_let_page, name="saved.html")
        (tmp_path / "guide_config.json").write_text(
            json.dumps({"input_html": "saved.html", "output_path": "out.md"}),
            encoding="utf-8",
        )
        create_guide.main([])
        assert (tmp_path / "out.md").exists()

    def test_config_error(self):
        with pytest.raises(SystemExit, match="Config error"):
            create_guide.main([])

    def test_input_error(self, tmp_path):
        with pytest.raises(SystemExit, match="Input error"):
            create_guide.main(
                ["--input-html", "missing.html", "--output", "guide.md"]
            )
        assert not (tmp_path / "guide.md").exists()

    def test_structure_error_and_skip_policy(self, write_page, tmp_path):
        source = write_page(
            wrap_page(article("Broken", '<p class="wrong">bad</p>'))
        )
        argv = ["--input-html", str(source), "--output", "guide.md"]
        with pytest.raises(SystemExit, match="Structure error"):
            create_guide.main(argv)
        create_guide.main(argv + ["--on-missing-code", "skip"])
        assert (tmp_path / "guide.md").read_text(encoding="utf-8") == (
            "### Broken\n\n"
        )

    def test_output_error(self, use_let_page, write_page, tmp_path):
        source = write_page(use_let_page)
        (tmp_path / "guide.md").mkdir()
        with pytest.raises(SystemExit, match="Output error"):
            create_guide.main(
                ["--input-html", str(source), "--output", "guide.md"]
            )
