"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest

from tx_engine import __version__
from tx_engine.cli import build_parser, load_config, main

SAMPLE = """type, client, tx, amount
deposit, 1, 1, 1.0
deposit, 2, 2, 2.0
deposit, 1, 3, 2.0
withdrawal, 1, 4, 1.5
withdrawal, 2, 5, 3.0
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TX_ENGINE_TRIM_WHITESPACE",
        "TX_ENGINE_OUTPUT_FORMAT",
        "TX_ENGINE_SORT_CLIENTS",
        "TX_ENGINE_LOG_LEVEL",
        "TX_ENGINE_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "transactions.csv"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


class TestLoadConfig:
    """Tests for merging environment and arguments."""

    def test_arguments_override_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test arguments override environment."""
        monkeypatch.setenv("TX_ENGINE_OUTPUT_FORMAT", "jsonl")
        args = build_parser().parse_args(["in.csv", "--format", "csv", "--sort-clients", "--log-level", "info"])

        config = load_config(args)

        assert config.sink.output_format == "csv"
        assert config.sink.sort_clients is True
        assert config.log_level == "INFO"

    def test_environment_kept_without_arguments(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test environment kept without arguments."""
        monkeypatch.setenv("TX_ENGINE_SORT_CLIENTS", "true")

        config = load_config(build_parser().parse_args(["in.csv"]))

        assert config.sink.sort_clients is True
        assert config.sink.output_format == "csv"


class TestMain:
    """Tests for the tx-engine entry point."""

    def test_sample_batch(self, sample_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test processing the sample batch prints both clients."""
        assert main([str(sample_file)]) == 0

        captured = capsys.readouterr()
        assert captured.out == (
            "client,available,held,total,locked\n"
            "1,1.5000,0.0000,1.5000,false\n"
            "2,2.0000,0.0000,2.0000,false\n"
        )
        assert "Error for transaction 5: Insufficient available funds" in captured.err

    def test_json_lines(self, sample_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test json lines."""
        assert main([str(sample_file), "--format", "jsonl"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert [json.loads(line)["client"] for line in lines] == [1, 2]
        assert json.loads(lines[0])["available"] == "1.5000"

    def test_sort_clients(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test sort clients."""
        path = tmp_path / "unordered.csv"
        path.write_text("type,client,tx,amount\ndeposit,3,1,1\ndeposit,1,2,1\n", encoding="utf-8")

        assert main([str(path), "--sort-clients"]) == 0

        rows = capsys.readouterr().out.splitlines()[1:]
        assert [row.split(",")[0] for row in rows] == ["1", "3"]

    def test_output_file(self, sample_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test output file."""
        output = tmp_path / "accounts.csv"

        assert main([str(sample_file), "-o", str(output)]) == 0

        assert capsys.readouterr().out == ""
        assert output.read_text(encoding="utf-8").splitlines()[1] == "1,1.5000,0.0000,1.5000,false"

    def test_wide_balance(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test balances wider than 24 integer digits are printed in full."""
        path = tmp_path / "wide.csv"
        path.write_text("type,client,tx,amount\ndeposit,1,1,1\ndeposit,2,2,1000000000000000000000000\n", encoding="utf-8")

        assert main([str(path)]) == 0

        assert capsys.readouterr().out.splitlines()[1:] == [
            "1,1.0000,0.0000,1.0000,false",
            "2,1000000000000000000000000.0000,0.0000,1000000000000000000000000.0000,false",
        ]

    def test_header_only_input(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test header only input."""
        path = tmp_path / "empty.csv"
        path.write_text("type,client,tx,amount\n", encoding="utf-8")

        assert main([str(path)]) == 0
        assert capsys.readouterr().out == ""

    def test_missing_input(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test missing input."""
        assert main([str(tmp_path / "missing.csv")]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("error: Cannot read input file:")

    def test_malformed_input(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test malformed input."""
        path = tmp_path / "bad.csv"
        path.write_text("type,client,tx,amount\ndeposit,1,1,1\ndeposit,x,2,1\n", encoding="utf-8")

        assert main([str(path)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "line 3: invalid client 'x'" in captured.err

    def test_unwritable_output(self, sample_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test unwritable output."""
        output = tmp_path / "missing-dir" / "accounts.csv"

        assert main([str(sample_file), "--output", str(output)]) == 1
        assert "error: Cannot open output file" in capsys.readouterr().err

    def test_invalid_environment(
        self, sample_file: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test invalid environment."""
        monkeypatch.setenv("TX_ENGINE_OUTPUT_FORMAT", "xml")

        assert main([str(sample_file)]) == 2
        assert "Unsupported output format" in capsys.readouterr().err

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --version prints the package version."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out
