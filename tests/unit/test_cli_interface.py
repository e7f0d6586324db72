# tests/unit/test_cli_interface.py

import json
import pytest
from taqti.core.poem_analyzer import PoemAnalyzer
from taqti.interface.cli_interface import build_parser, main, render_report


class TestBuildParser:
    """Test command-line argument parsing"""

    def test_analyze_text(self):
        args = build_parser().parse_args(["analyze", "--text", "काक काक", "--json"])

        assert args.command == "analyze"
        assert args.text == "काक काक"
        assert args.json is True
        assert args.no_store is False

    def test_analyze_requires_source(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["analyze"])

    def test_text_and_file_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["analyze", "-t", "a", "-f", "b"])

    def test_history_defaults(self):
        args = build_parser().parse_args(["history"])

        assert args.limit == 20
        assert args.page == 1

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestRenderReport:
    """Test plain-text report rendering"""

    def test_success(self):
        output = render_report(PoemAnalyzer().analyze("काक काक"))

        assert "मिश्रित छोटा" in output
        assert "Pattern: 2121" in output
        assert "का | क | का | क" in output

    def test_script_violation(self):
        output = render_report(PoemAnalyzer().analyze("दिल की बात\nmera dil"))

        assert "❌" in output
        assert "mera dil" in output


class TestMain:
    """Test the CLI entry point end to end"""

    def test_analyze_json(self, config_file, capsys):
        exit_code = main(["-c", str(config_file()), "analyze", "--text", "काक काक", "--json"])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data["analyzerUsed"] == "HindiAnalyzer"
        assert data["result"]["bahrType"] == "मिश्रित छोटा"

    def test_analyze_table(self, config_file, capsys):
        exit_code = main(["-c", str(config_file()), "analyze", "-t", "aise tevar dushman hi hote hain"])

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "dush" in output

    def test_analyze_script_error(self, config_file, capsys):
        exit_code = main(["-c", str(config_file()), "analyze", "-t", "mera dil 5 baar"])

        assert exit_code == 1
        assert "❌" in capsys.readouterr().out

    def test_analyze_file(self, config_file, tmp_path, capsys):
        poem = tmp_path / "poem.txt"
        poem.write_text("काक काक\nकाक काक\n", encoding="utf-8")

        exit_code = main(["-c", str(config_file()), "analyze", "--file", str(poem), "--json"])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert len(data["result"]["lines"]) == 2

    def test_analyze_missing_file(self, config_file, tmp_path, capsys):
        exit_code = main(["-c", str(config_file()), "analyze", "--file", str(tmp_path / "missing.txt")])

        assert exit_code == 1
        assert "Error reading" in capsys.readouterr().err

    def test_history(self, config_file, capsys):
        path = str(config_file())
        main(["-c", path, "analyze", "-t", "काक काक"])
        main(["-c", path, "analyze", "-t", "कका कका", "--no-store"])
        capsys.readouterr()

        exit_code = main(["-c", path, "history", "--json"])

        listing = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert listing["total"] == 1
        assert listing["data"][0]["text"] == "काक काक"

    def test_history_table(self, config_file, capsys):
        path = str(config_file())
        main(["-c", path, "analyze", "-t", "काक काक"])
        capsys.readouterr()

        exit_code = main(["-c", path, "history"])

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "Page 1 of 1" in output
        assert "HindiAnalyzer" in output

    def test_history_storage_disabled(self, config_file, capsys):
        exit_code = main(["-c", str(config_file(storage_enabled=False)), "history"])

        assert exit_code == 1
        assert "Analysis storage is disabled" in capsys.readouterr().out

    def test_history_invalid_limit(self, config_file):
        with pytest.raises(SystemExit) as excinfo:
            main(["-c", str(config_file()), "history", "--limit", "0"])

        assert excinfo.value.code == 2
