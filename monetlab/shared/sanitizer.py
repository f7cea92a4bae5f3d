#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/shared/sanitizer.py

import argparse
import math
import re

from monetlab.core import config as c


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value: str) -> str:
    """
    Normalizes various formats of hex strings into a standard 6-character uppercase hex.
    Handles shorthand formats (e.g., 'F', 'FF', 'FFF') by repeating characters appropriately.
    """
    if value is None:
        return ""
    s = str(value).replace("#", "").replace(" ", "").upper()
    if s.startswith("0X"):
        s = s[2:]

    # Regex [0-9A-F] extracts only valid hexadecimal characters, ignoring any garbage input
    extracted = "".join(re.findall(r"[0-9A-F]", s))

    if not extracted:
        return ""

    L = len(extracted)
    if L == 6:
        return extracted
    if L == 3:
        # e.g., 'ABC' becomes 'AABBCC'
        return "".join([ch * 2 for ch in extracted])
    if L == 1:
        return extracted * 6
    if L == 2:
        return extracted * 3
    if L == 8:
        # AARRGGBB, alpha is dropped
        return extracted[2:]
    if L == 4:
        return extracted + "00"
    if L == 5:
        return extracted + "0"

    return extracted[:6]


def _extract_positive_only_int(value: str) -> int:
    """
    Extracts a strictly positive integer from a string by stripping out
    all non-numeric characters (including minus signs).
    """
    if value is None:
        return None
    digits_only = re.sub(r"[^0-9]", "", str(value))
    if not digits_only:
        return None
    try:
        return int(digits_only)
    except ValueError:
        return None


def _extract_signed_int(value) -> int:
    """
    Extracts an integer from a string while preserving its mathematical sign (+ or -).
    Fractional parts are truncated; booleans map to 0/1.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)

    s = str(value).strip()
    if s.lower() in ("true", "false"):
        return int(s.lower() == "true")
    match = re.search(r"[-+]?\d+", s)
    if not match:
        return None
    try:
        return int(match.group(0))
    except ValueError:
        return None


def _extract_signed_float(value) -> float:
    """
    Extracts a floating-point number from a string, preserving the sign and
    handling multiple decimal points by keeping only the first one encountered.
    Well-formed numbers (including exponents like '1e2') are parsed as-is.
    """
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)

    s = str(value)
    try:
        val = float(s.strip())
        if math.isfinite(val):
            return val
    except ValueError:
        pass

    is_negative = s.strip().startswith("-")

    # Regex [0-9\.] extracts only numeric digits and literal dot (.) characters
    raw_chars = re.findall(r"[0-9\.]", s)
    if not raw_chars:
        return None

    clean_str = ""
    dot_seen = False
    for char in raw_chars:
        if char == '.':
            if not dot_seen:
                clean_str += char
                dot_seen = True
        else:
            clean_str += char

    if not clean_str or clean_str == '.':
        return None

    try:
        val = float(clean_str)
        if is_negative:
            val = -val
        return val
    except ValueError:
        return None


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex string CLI arguments."""
    cleaned = normalize_hex(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hex value: '{raw}'")
    return cleaned


def handle_decimal_index(v: str) -> str:
    """
    Validator for decimal indices. Clamps the value between 0 and MAX_DEC,
    and returns it formatted as a 6-character hex string.
    """
    val = _extract_positive_only_int(v)

    if val is None:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid decimal index: '{raw}'")

    val = min(val, c.MAX_DEC)
    return f"{val:06X}"


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "decimal_index": handle_decimal_index,
    "seed": handle_int_range(0, 999_999_999_999_999_999),
    "white_luminance_user": handle_int_range(0, c.WHITE_LUMINANCE_USER_MAX),
    "white_luminance": handle_float_range(c.WHITE_LUMINANCE_MIN, c.WHITE_LUMINANCE_MAX),
    "chroma_factor": handle_float_range(0.0, 1000.0),
}


# ==========================================
# Settings Value Coercion
# ==========================================

def coerce_int(value, default: int) -> int:
    """
    Reads a stored setting as an integer. Accepts ints, bools, numeric strings
    and color strings ('#RRGGBB', '#AARRGGBB', '0x...'); anything else yields default.
    """
    if value is None:
        return default
    if isinstance(value, str):
        s = value.strip()
        if s.startswith("#") or s.lower().startswith("0x"):
            h = normalize_hex(s)
            return int(h, 16) | c.ALPHA_OPAQUE if h else default
    val = _extract_signed_int(value)
    return default if val is None else val


def coerce_float(value, default: float) -> float:
    if value is None:
        return default
    val = _extract_signed_float(value)
    return default if val is None else val
