"""Unit tests for the command-line interface."""

import json

from typer.testing import CliRunner

from lettertrace import __version__
from lettertrace.catalog import get_letter
from lettertrace.cli.app import app
from lettertrace.io import CatalogReader
from lettertrace.io.reader import CATALOG_FORMAT, CATALOG_VERSION

runner = CliRunner()


class TestVersion:
    """Tests for the --version option."""

    def test_version(self):
        """Test --version prints the version and exits cleanly."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestLettersCommand:
    """Tests for the letters command."""

    def test_lists_builtin(self):
        """Test the built-in catalog is listed."""
        result = runner.invoke(app, ["letters"])
        assert result.exit_code == 0
        assert "Apple" in result.output
        assert "Zebra" in result.output
        assert "26 letters" in result.output

    def test_missing_catalog(self, tmp_path):
        """Test a missing catalog file is reported."""
        result = runner.invoke(app, ["letters", "--catalog", str(tmp_path / "none.json")])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_catalog_not_utf8(self, tmp_path):
        """Test a catalog file that is not UTF-8 is reported."""
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"letters": ["\xff\xfe"]}')

        result = runner.invoke(app, ["letters", "--catalog", str(path)])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestValidateCommand:
    """Tests for the validate command."""

    def test_builtin_valid(self):
        """Test the built-in catalog validates."""
        result = runner.invoke(app, ["validate"])
        assert result.exit_code == 0
        assert "Valid" in result.output

    def test_reports_every_defect(self, tmp_path):
        """Test each defective letter in a file is reported."""
        a = get_letter("A").to_dict()
        a["strokes"][0]["completion_threshold"] = 1.5
        b = get_letter("B").to_dict()
        b["strokes"] = []
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"letters": [a, b]}), encoding="utf-8")

        result = runner.invoke(app, ["validate", "--catalog", str(path)])

        assert result.exit_code == 1
        assert "2 defects" in result.output
        assert "left-leg" in result.output
        assert "no strokes" in result.output

    def test_missing_file(self, tmp_path):
        """Test validating a missing file fails."""
        result = runner.invoke(app, ["validate", "--catalog", str(tmp_path / "none.json")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_unreadable_file(self, tmp_path):
        """Test a file that is not a catalog fails."""
        path = tmp_path / "bad.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")

        result = runner.invoke(app, ["validate", "--catalog", str(path)])
        assert result.exit_code == 1

    def test_unknown_format(self, tmp_path):
        """Test a file tagged with another format is not validated."""
        path = tmp_path / "other.json"
        document = {"format": "other", "letters": [get_letter("A").to_dict()]}
        path.write_text(json.dumps(document), encoding="utf-8")

        result = runner.invoke(app, ["validate", "--catalog", str(path)])
        assert result.exit_code == 1
        assert "Valid" not in result.output

    def test_unsupported_version(self, tmp_path):
        """Test a file with a future version is not validated."""
        path = tmp_path / "future.json"
        document = {"version": 2, "letters": [get_letter("A").to_dict()]}
        path.write_text(json.dumps(document), encoding="utf-8")

        result = runner.invoke(app, ["validate", "--catalog", str(path)])
        assert result.exit_code == 1


class TestExportCommand:
    """Tests for the export command."""

    def test_export(self, tmp_path):
        """Test exporting writes a loadable catalog."""
        path = tmp_path / "letters.json"
        result = runner.invoke(app, ["export", str(path)])

        assert result.exit_code == 0
        with CatalogReader(path) as reader:
            assert reader.letter_count == 26

    def test_refuses_overwrite(self, tmp_path):
        """Test an existing file needs --force."""
        path = tmp_path / "letters.json"
        path.write_text("{}", encoding="utf-8")

        result = runner.invoke(app, ["export", str(path)])
        assert result.exit_code == 1
        assert path.read_text(encoding="utf-8") == "{}"

        result = runner.invoke(app, ["export", str(path), "--force"])
        assert result.exit_code == 0
        assert json.loads(path.read_text(encoding="utf-8"))["format"] == CATALOG_FORMAT


class TestTraceCommand:
    """Tests for the trace command."""

    def test_trace_letter(self):
        """Test tracing a fixed letter runs to the reward."""
        result = runner.invoke(app, ["trace", "A"])

        assert result.exit_code == 0
        assert "Trace the letter A!" in result.output
        assert "left-leg" in result.output
        assert "crossbar" in result.output
        assert "A is for Apple! Great job!" in result.output

    def test_trace_lowercase(self):
        """Test the letter argument is case-insensitive."""
        result = runner.invoke(app, ["trace", "m", "--quiet"])
        assert result.exit_code == 0
        assert "M Monkey" in result.output

    def test_seeded_trace_repeatable(self):
        """Test the same seed traces the same letter."""
        first = runner.invoke(app, ["trace", "--seed", "11", "--quiet"])
        second = runner.invoke(app, ["trace", "--seed", "11", "--quiet"])

        assert first.exit_code == 0
        assert first.output == second.output

    def test_no_grid(self):
        """Test --no-grid hides the coverage grids."""
        result = runner.invoke(app, ["trace", "L", "--no-grid"])
        assert result.exit_code == 0
        assert "■" not in result.output

    def test_unknown_letter(self):
        """Test tracing a glyph outside the catalog fails."""
        result = runner.invoke(app, ["trace", "7"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_options(self):
        """Test out-of-range settings are rejected."""
        result = runner.invoke(app, ["trace", "A", "--resolution", "1"])
        assert result.exit_code == 1
        assert "Invalid options" in result.output

    def test_unknown_log_level(self):
        """Test an unknown log level is rejected as an invalid option."""
        result = runner.invoke(app, ["trace", "A", "--log-level", "bogus"])
        assert result.exit_code == 1
        assert "Invalid options" in result.output

    def test_lowercase_log_level(self):
        """Test log level names are accepted in any case."""
        result = runner.invoke(app, ["trace", "A", "--log-level", "info", "--quiet"])
        assert result.exit_code == 0

    def test_letter_unfinishable_on_grid(self):
        """Test a grid too coarse for a stroke fails before tracing."""
        result = runner.invoke(app, ["trace", "A", "--resolution", "2"])
        assert result.exit_code == 1
        assert "crossbar" in result.output

    def test_stroke_width(self):
        """Test the built-in letters can be traced with wider zones."""
        result = runner.invoke(app, ["trace", "L", "--stroke-width", "35", "--quiet"])
        assert result.exit_code == 0
        assert "L Lion" in result.output

    def test_stroke_width_out_of_range(self):
        """Test a zero stroke width is rejected."""
        result = runner.invoke(app, ["trace", "L", "--stroke-width", "0"])
        assert result.exit_code == 1
        assert "Invalid options" in result.output

    def test_custom_catalog(self, tmp_path):
        """Test tracing a letter from a catalog file."""
        path = tmp_path / "letters.json"
        document = {
            "format": CATALOG_FORMAT,
            "version": CATALOG_VERSION,
            "letters": [get_letter("O").to_dict()],
        }
        path.write_text(json.dumps(document), encoding="utf-8")

        result = runner.invoke(app, ["trace", "--catalog", str(path), "--quiet"])
        assert result.exit_code == 0
        assert "O Octopus" in result.output

    def test_log_file(self, tmp_path):
        """Test --log-file records the session."""
        log_file = tmp_path / "trace.log"
        result = runner.invoke(app, ["trace", "T", "--log-file", str(log_file), "--quiet"])

        assert result.exit_code == 0
        content = log_file.read_text(encoding="utf-8")
        assert "Session started" in content
        assert "Letter complete" in content
