#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/subcommands/command_registry.py

from . import (
    generate,
    palette,
    luminance,
)

SUBCOMMANDS = {
    'generate': generate,
    'palette': palette,
    'luminance': luminance,
}
