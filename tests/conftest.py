"""Shared pytest fixtures for monetlab tests."""

from __future__ import annotations

import pytest

from monetlab.core import config as c
from monetlab.core.color import Srgb
from monetlab.core.luminance import parse_white_luminance_user
from monetlab.core.params import ThemeParameters
from monetlab.core.zcam import ViewingConditions
from monetlab.logic.palette.targets import TargetCurveSet, build_targets
from monetlab.logic.palette.viewing import build_viewing_conditions
from monetlab.shared.logger import set_verbose


@pytest.fixture(autouse=True)
def quiet_logger():
    """Every test starts and ends with debug logging off."""
    set_verbose(False)
    yield
    set_verbose(False)


@pytest.fixture
def cond() -> ViewingConditions:
    """Viewing conditions for the default white luminance slider position."""
    return build_viewing_conditions(parse_white_luminance_user(c.WHITE_LUMINANCE_USER_DEFAULT))


@pytest.fixture
def targets(cond: ViewingConditions) -> TargetCurveSet:
    return build_targets(1.0, False, cond)


@pytest.fixture
def blue_seed() -> Srgb:
    return Srgb(0, 0, 255)


@pytest.fixture
def default_params() -> ThemeParameters:
    return ThemeParameters()


@pytest.fixture
def blue_params(blue_seed: Srgb) -> ThemeParameters:
    """Stock settings with a pure blue seed."""
    return ThemeParameters(seed_color=blue_seed)
