#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/shared/formatting.py

import json
from typing import Dict


def format_argb(value: int) -> str:
    return f"#{int(value) & 0xFFFFFFFF:08X}"


def format_zcam(lightness: float, chroma: float, hue: float) -> str:
    return f"zcam({lightness:.2f} {chroma:.2f} {hue:.2f}deg)"


def tokens_to_json(overlays: Dict[str, Dict[str, int]], pretty: bool = True) -> str:
    """Serialize per-family token maps with ARGB values as #AARRGGBB strings."""
    doc = {
        family: {name: format_argb(value) for name, value in tokens.items()}
        for family, tokens in overlays.items()
    }
    return json.dumps(doc, indent=2 if pretty else None)
