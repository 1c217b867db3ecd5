"""Tests for the decode_packets command-line driver."""

import logging
from pathlib import Path

import pytest

from decode_packets import build_parser, main


def _write_input(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "input.txt"
    path.write_text(text)
    return path


def _nested_sum_hex(levels: int) -> str:
    """Hex for `levels` single-child Sum packets wrapped around the literal 1."""
    bits = "000000" + "1" + "00000000001"
    bits = bits * levels + "000100" + "00001"
    bits += "0" * (-len(bits) % 4)
    return format(int(bits, 2), "X").zfill(len(bits) // 4)


class TestMain:
    """End-to-end runs of main()."""

    def test_prints_both_parts(self, tmp_path: Path, capsys) -> None:
        path = _write_input(tmp_path, "9C0141080250320F1802104A08\n")
        assert main([str(path)]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["Part 1: 20", "Part 2: 1"]

    def test_show_tree(self, tmp_path: Path, capsys) -> None:
        path = _write_input(tmp_path, "C200B40A82")
        assert main([str(path), "--show-tree"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["Part 1: 14", "Part 2: 3", "(sum 1 2)"]

    def test_invalid_hex_fails(self, tmp_path: Path, capsys, caplog) -> None:
        path = _write_input(tmp_path, "C200X40A82\n")
        with caplog.at_level(logging.ERROR):
            assert main([str(path)]) == 1
        assert "InvalidHexCharacter" in caplog.text
        assert capsys.readouterr().out == ""

    def test_evaluation_error_fails(self, tmp_path: Path, caplog) -> None:
        path = _write_input(tmp_path, "08000000")
        with caplog.at_level(logging.ERROR):
            assert main([str(path)]) == 1
        assert "EmptyReduction" in caplog.text

    def test_depth_limit(self, tmp_path: Path, caplog) -> None:
        path = _write_input(tmp_path, "C200B40A82")
        with caplog.at_level(logging.ERROR):
            assert main([str(path), "--max-depth", "0"]) == 1
        assert "NestingTooDeep" in caplog.text

    def test_negative_depth_rejected(self, tmp_path: Path, caplog) -> None:
        path = _write_input(tmp_path, "C200B40A82")
        with caplog.at_level(logging.ERROR):
            assert main([str(path), "--max-depth", "-1"]) == 1
        assert "max_depth" in caplog.text

    def test_missing_file(self, tmp_path: Path, caplog) -> None:
        with caplog.at_level(logging.ERROR):
            assert main([str(tmp_path / "missing.txt")]) == 1
        assert "Cannot read" in caplog.text

    def test_undecodable_file(self, tmp_path: Path, capsys, caplog) -> None:
        """A file that is not valid text is reported, not raised."""
        path = tmp_path / "input.txt"
        path.write_bytes(b"\xff\xfeC200B40A82")
        with caplog.at_level(logging.ERROR):
            assert main([str(path)]) == 1
        assert "Cannot read" in caplog.text
        assert capsys.readouterr().out == ""

    def test_oversized_depth_rejected(self, tmp_path: Path, caplog) -> None:
        """A depth limit beyond the recursion budget fails cleanly on deep input."""
        path = _write_input(tmp_path, _nested_sum_hex(2000))
        with caplog.at_level(logging.ERROR):
            assert main([str(path), "--max-depth", "100000"]) == 1
        assert "max_depth" in caplog.text

    def test_deep_input_default_depth(self, tmp_path: Path, caplog) -> None:
        path = _write_input(tmp_path, _nested_sum_hex(2000))
        with caplog.at_level(logging.ERROR):
            assert main([str(path)]) == 1
        assert "NestingTooDeep" in caplog.text


class TestParser:
    """Argument defaults."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.input == Path("input.txt")
        assert args.max_depth == 256
        assert not args.show_tree
        assert not args.verbose

    def test_rejects_non_integer_depth(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--max-depth", "deep"])
