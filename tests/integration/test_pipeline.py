"""
Integration tests: text in, PostScript out.

Runs the real shaper (reportlab metrics), flow engine and emitter together.
"""
import io
from datetime import datetime

import pytest

from config.settings import Settings
from textps.cli import EXIT_CONFIG, EXIT_INPUT, EXIT_OK, main
from textps.pipeline import DocumentPipeline


STAMP = datetime(2024, 3, 5, 14, 30, 0)


def render(text, **overrides):
    pipeline = DocumentPipeline(Settings(_env_file=None, **overrides), timestamp=STAMP)
    sink = io.StringIO()
    pages = pipeline.render(text, sink, title="notes.txt")
    return pages, sink.getvalue()


class TestDocumentPipeline:
    """Test DocumentPipeline end to end."""

    def test_small_document(self, sample_text):
        pages, output = render(sample_text)

        assert pages == 2
        assert output.startswith("%!PS-Adobe-3.0\n")
        assert "(The quick brown fox jumps over the lazy dog.) show" in output
        assert "%%Title: notes.txt\n" in output
        assert output.endswith("%%Trailer\n%%Pages: 2\n%%EOF\n")

    def test_page_count_matches_markers(self):
        text = "".join(f"line {i}\n" for i in range(200))
        pages, output = render(text, columns=2)

        assert pages >= 2
        assert output.count("%%Page: ") == pages
        assert output.count("showpage") == pages
        assert f"%%Pages: {pages}\n%%EOF" in output

    def test_form_feed_starts_page(self):
        pages, output = render("first\fsecond\n")
        assert pages == 2
        assert output.index("(first) show") < output.index("%%Page: 2 2") < output.index("(second) show")

    def test_empty_input_gives_blank_page(self):
        pages, output = render("")
        assert pages == 1
        assert "%%Page: 1 1\n" in output

    def test_header_and_footer(self):
        pages, output = render("hello\n", header=True, footer=True)

        assert pages == 1
        assert output.count("(Page 1) show") == 2
        assert "(notes.txt) show" in output
        assert f"({STAMP.strftime('%c')}) show" in output
        assert "Courier-Bold-Latin1" in output

    def test_header_shrinks_body(self):
        pipeline = DocumentPipeline(Settings(_env_file=None, header=True), timestamp=STAMP)
        plain = DocumentPipeline(Settings(_env_file=None), timestamp=STAMP)

        geometry, _, composer = pipeline.prepare("notes.txt")
        plain_geometry, _, plain_composer = plain.prepare("notes.txt")

        assert plain_composer is None
        assert geometry.header_height > 0
        assert geometry.column_height == pytest.approx(
            plain_geometry.column_height - geometry.header_height - geometry.header_sep
        )

    def test_long_lines_wrap(self):
        pages, output = render("word " * 400 + "\n", columns=3)
        assert pages == 1
        assert output.count(" show\n") > 10

    def test_render_file(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_bytes(b"caf\xe9\n")

        pipeline = DocumentPipeline(Settings(_env_file=None, encoding="latin-1"), timestamp=STAMP)
        sink = io.StringIO()
        pages = pipeline.render_file(path, sink)

        assert pages == 1
        assert "(caf\\351) show" in sink.getvalue()
        assert f"%%Title: {path}" in sink.getvalue()


class TestCli:
    """Test textps.cli.main exit codes."""

    def test_writes_output_file(self, tmp_path):
        source = tmp_path / "in.txt"
        source.write_text("hello\nworld\n")
        target = tmp_path / "out.ps"

        assert main([str(source), "-o", str(target), "--columns", "2", "--header"]) == EXIT_OK

        output = target.read_text(encoding="latin-1")
        assert output.startswith("%!PS-Adobe-3.0")
        assert "/numcolumns 2 def" in output
        assert "(hello) show" in output

    def test_impossible_geometry(self, tmp_path):
        source = tmp_path / "in.txt"
        source.write_text("hello\n")
        target = tmp_path / "out.ps"

        assert main([str(source), "-o", str(target), "--columns", "0"]) == EXIT_CONFIG
        assert not target.exists()

    def test_unknown_encoding(self, tmp_path):
        source = tmp_path / "in.txt"
        source.write_text("hello\n")
        assert main([str(source), "--encoding", "no-such-codec"]) == EXIT_CONFIG

    def test_missing_input(self, tmp_path):
        assert main([str(tmp_path / "missing.txt")]) == EXIT_INPUT

    def test_stdout(self, tmp_path, capsys):
        source = tmp_path / "in.txt"
        source.write_text("hello\n")

        assert main([str(source), "--landscape", "--paper", "Letter"]) == EXIT_OK

        output = capsys.readouterr().out
        assert "%%BoundingBox: 0 0 612 792" in output
        assert "%%Orientation: Landscape" in output
