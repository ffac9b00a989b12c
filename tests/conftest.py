from __future__ import annotations

from typing import List, Tuple

import pytest

import coinscale
from coinscale.core import Asset, OperationType


REF = Asset.REFERENCE
GEN = Asset.GENERIC

#: Every valid (buy, sell) pair; REFERENCE/REFERENCE is never a pair.
VALID_PAIRS: List[Tuple[Asset, Asset]] = [
    (GEN, GEN),
    (GEN, REF),
    (REF, GEN),
]


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture(autouse=True)
def _debug_off():
    """Tests that switch the debug channel on must not leak it into others."""
    coinscale.set_debug(False)
    yield
    coinscale.set_debug(False)


@pytest.fixture(params=VALID_PAIRS, ids=lambda p: f"{p[0].value}/{p[1].value}")
def pair(request) -> Tuple[Asset, Asset]:
    return request.param


@pytest.fixture(params=list(OperationType), ids=lambda op: op.value)
def op(request) -> OperationType:
    return request.param
