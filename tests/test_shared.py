"""Tests for input sanitizing, formatting and logging helpers."""

from __future__ import annotations

import argparse
import json

import pytest

from monetlab.core import config as c
from monetlab.shared.formatting import format_argb, format_zcam, tokens_to_json
from monetlab.shared.logger import is_verbose, log, set_verbose
from monetlab.shared.sanitizer import INPUT_HANDLERS, coerce_float, coerce_int, normalize_hex


class TestNormalizeHex:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("#1b6ef3", "1B6EF3"),
            ("abc", "AABBCC"),
            ("f", "FFFFFF"),
            ("0xFF1B6EF3", "1B6EF3"),
            ("  #12 34 56 ", "123456"),
            ("zz", ""),
        ],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        assert normalize_hex(raw) == expected


class TestHandlers:
    def test_hex_rejects_garbage(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            INPUT_HANDLERS["hex"]("xyz")

    def test_decimal_index_clamps(self) -> None:
        assert INPUT_HANDLERS["decimal_index"]("99999999") == "FFFFFF"
        assert INPUT_HANDLERS["decimal_index"]("255") == "0000FF"

    def test_white_luminance_slider_clamps(self) -> None:
        assert INPUT_HANDLERS["white_luminance_user"]("1200") == c.WHITE_LUMINANCE_USER_MAX
        assert INPUT_HANDLERS["white_luminance_user"]("-3") == 0

    def test_chroma_factor_float(self) -> None:
        assert INPUT_HANDLERS["chroma_factor"]("85.5") == 85.5
        assert INPUT_HANDLERS["chroma_factor"]("-10") == 0.0


class TestCoerce:
    def test_coerce_int(self) -> None:
        assert coerce_int(None, 4) == 4
        assert coerce_int("false", 4) == 0
        assert coerce_int(2.9, 4) == 2
        assert coerce_int("#000000", 4) == c.ALPHA_OPAQUE

    def test_coerce_float(self) -> None:
        assert coerce_float("12.5%", 0.0) == 12.5
        assert coerce_float("n/a", 1.0) == 1.0

    def test_coerce_float_reads_exponents(self) -> None:
        assert coerce_float("1e2", 0.0) == 100.0
        assert coerce_float(" -2.5E-1 ", 0.0) == -0.25
        assert coerce_float("nan", 7.0) == 7.0

    def test_chroma_factor_handler_reads_exponents(self) -> None:
        assert INPUT_HANDLERS["chroma_factor"]("1e2") == 100.0


class TestFormatting:
    def test_format_argb(self) -> None:
        assert format_argb(0xFF1B6EF3) == "#FF1B6EF3"

    def test_format_zcam(self) -> None:
        assert format_zcam(50.0, 12.5, 250.0) == "zcam(50.00 12.50 250.00deg)"

    def test_tokens_to_json(self) -> None:
        doc = json.loads(tokens_to_json({"accent": {"accent1-0": 0xFFFFFFFF}}, pretty=False))
        assert doc == {"accent": {"accent1-0": "#FFFFFFFF"}}


class TestLogger:
    def test_debug_hidden_unless_verbose(self, capsys) -> None:
        log("debug", "hidden")
        assert capsys.readouterr().err == ""

        set_verbose(True)
        assert is_verbose()
        log("debug", "shown")
        assert "shown" in capsys.readouterr().err

    def test_info_goes_to_stdout(self, capsys) -> None:
        log("info", "hello")
        out = capsys.readouterr()
        assert "hello" in out.out
        assert out.err == ""
