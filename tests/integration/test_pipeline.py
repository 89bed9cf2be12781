"""Integration tests for the collect, apply and output pipeline."""

import io
import json

import pytest
import yaml
from loguru import logger

from stringext.core import Config, OperationResult
from stringext.processing import collect_inputs, generate_output, run_pipeline
from stringext.utils.logging import setup_logger


class TestCollectInputs:
    """Test where input texts come from."""

    def test_positional_texts(self) -> None:
        """Texts on the config are used as given."""
        config = Config(operation="slug", texts=["a", "b"])
        assert collect_inputs(config) == ["a", "b"]

    def test_input_file(self, tmp_path) -> None:
        """Lines are read from the input file without terminators."""
        input_file = tmp_path / "in.txt"
        input_file.write_text("one\r\ntwo\n", encoding="utf-8")
        config = Config(operation="slug", input=str(input_file))
        assert collect_inputs(config) == ["one", "two"]

    def test_stdin(self, monkeypatch) -> None:
        """Without texts or a file, stdin is read."""
        monkeypatch.setattr("sys.stdin", io.StringIO("x\ny\n"))
        assert collect_inputs(Config(operation="slug")) == ["x", "y"]

    def test_only_line_feed_separates_records(self, tmp_path) -> None:
        """Form feeds and U+2028 inside a line stay part of that record."""
        input_file = tmp_path / "in.txt"
        input_file.write_text("a\x0cb\nc\u2028d\n", encoding="utf-8")
        config = Config(operation="slug", input=str(input_file))
        assert collect_inputs(config) == ["a\x0cb", "c\u2028d"]

    def test_stdin_keeps_unicode_separators(self, monkeypatch) -> None:
        """stdin is split the same way as files."""
        monkeypatch.setattr("sys.stdin", io.StringIO("x\x85y\r\nz"))
        assert collect_inputs(Config(operation="slug")) == ["x\x85y", "z"]

    def test_strip_and_skip_blank(self) -> None:
        """Lines are trimmed and blank ones dropped."""
        config = Config(
            operation="slug", texts=["  a ", "   ", "b"], strip_lines=True, skip_blank=True
        )
        assert collect_inputs(config) == ["a", "b"]

    def test_blank_lines_kept_by_default(self) -> None:
        """Blank lines are inputs unless skip_blank is set."""
        assert collect_inputs(Config(operation="slug", texts=["a", ""])) == ["a", ""]


class TestRunPipeline:
    """Test complete runs."""

    def test_text_output_to_stdout(self, capsys) -> None:
        """One result line per input, in order."""
        run_pipeline(Config(operation="slug", texts=["Hello, World!", "Crème Brûlée"]))
        assert capsys.readouterr().out == "hello-world\ncreme-brulee\n"

    def test_returns_results(self, capsys) -> None:
        """Results pair each input with its output."""
        results = run_pipeline(Config(operation="grapheme-count", texts=["ab"]))
        assert results == [OperationResult(input="ab", output=2)]

    def test_json_output_file(self, tmp_path) -> None:
        """JSON records keep input and output, including non-ASCII text."""
        output_file = tmp_path / "out" / "results.json"
        run_pipeline(
            Config(
                operation="remove-diacritics",
                texts=["café"],
                output=str(output_file),
                output_format="json",
            )
        )
        records = json.loads(output_file.read_text(encoding="utf-8"))
        assert records == [{"input": "café", "output": "cafe"}]

    def test_yaml_output_file(self, tmp_path) -> None:
        """YAML output preserves dict-valued results."""
        output_file = tmp_path / "results.yaml"
        run_pipeline(
            Config(
                operation="parse-query",
                texts=["?a=1&bad&b=2"],
                output=str(output_file),
                output_format="yaml",
            )
        )
        records = yaml.safe_load(output_file.read_text(encoding="utf-8"))
        assert records == [{"input": "?a=1&bad&b=2", "output": {"a": "1", "b": "2"}}]

    def test_verbose_logs_summary(self, capsys) -> None:
        """Verbose runs log the processed count."""
        setup_logger(verbose=True)
        log_capture = io.StringIO()
        handler_id = logger.add(log_capture, level="INFO", format="{message}")
        try:
            run_pipeline(Config(operation="sha256", texts=["a", "b"], verbose=True))
        finally:
            logger.remove(handler_id)
        assert "Processed 2 inputs" in log_capture.getvalue()


class TestGenerateOutput:
    """Test output rendering."""

    def test_text_rendering_of_mixed_values(self, capsys) -> None:
        """Booleans, dicts, lists and None each render on one line."""
        results = [
            OperationResult("a", True),
            OperationResult("b", {"k": "v", "x": "y"}),
            OperationResult("c", ["c1", "c2"]),
            OperationResult("d", None),
        ]
        generate_output(results, None)
        assert capsys.readouterr().out == "true\nk=v x=y\nc1 c2\n\n"

    def test_invalid_format(self) -> None:
        """Unknown formats raise ValueError."""
        with pytest.raises(ValueError, match="Invalid output format"):
            generate_output([], None, "xml")

    def test_unwritable_path_raises(self, tmp_path) -> None:
        """A directory in place of the output file surfaces as OSError."""
        with pytest.raises(OSError):
            generate_output([OperationResult("a", "b")], str(tmp_path))
