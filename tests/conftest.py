"""
Shared pytest fixtures for the permbits tests.

Every test that takes the ``bitwise`` fixture runs once against the pure Python
backend and once against the Cython backend.
"""

import importlib

import pytest


BACKENDS = ["permbits.pycore.bitwise", "permbits.cycore.bitwise"]


@pytest.fixture(params=BACKENDS, ids=["pycore", "cycore"])
def bitwise(request):
    """The bitwise module of one backend."""
    return importlib.import_module(request.param)
