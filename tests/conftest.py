from __future__ import annotations

import pytest

from listing.ids import sequential_ids
from listing.settings import DEFAULT_SETTINGS, WizardSettings
from listing._types import IdGenerator
from listing.wizard import WizardController

from _support import FIXED_NOW, fill_required_steps


@pytest.fixture
def settings() -> WizardSettings:
    return DEFAULT_SETTINGS


@pytest.fixture
def ids() -> IdGenerator:
    return sequential_ids("t")


@pytest.fixture
def wizard() -> WizardController:
    return WizardController(ids=sequential_ids("t"), clock=lambda: FIXED_NOW)


@pytest.fixture
def filled(wizard: WizardController) -> WizardController:
    fill_required_steps(wizard)
    return wizard
