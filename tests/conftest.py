"""
Pytest fixtures for typeshield tests.
"""

import pytest

from typeshield import (
    FunctionType,
    NumberType,
    StringType,
    reset_global_mode,
)
from typeshield.config import MODE_ENV_VAR


@pytest.fixture(autouse=True)
def default_mode(monkeypatch):
    """Every test starts in STRICT mode with no global override."""
    monkeypatch.delenv(MODE_ENV_VAR, raising=False)
    reset_global_mode()
    yield
    reset_global_mode()


@pytest.fixture
def calls():
    """Spy list recording constructor and method bodies that actually ran."""
    return []


@pytest.fixture
def area_class(calls):
    """A fresh user class per test, taking a single argument mapping."""

    class Area:
        """Rectangle area."""

        def __init__(self, args):
            calls.append('__init__')
            self.length = args.get('length')
            self.breadth = args.get('breadth')

        def calculate_area(self):
            calls.append('calculate_area')
            return self.length * self.breadth

        def resize(self, args):
            calls.append('resize')
            self.length = self.length * args['factor']
            self.breadth = self.breadth * args['factor']
            return self.length, self.breadth

        def describe(self):
            return f"{self.length}x{self.breadth}"

    return Area


@pytest.fixture
def area_schema():
    return {
        'length': NumberType({'range': [1, 100]}),
        'breadth': NumberType(),
        'unit': StringType({'oneOf': ['cm', 'm']}),
        'calculate_area': FunctionType({
            'requiredAttributes': {
                'length': lambda v: v,
                'breadth': lambda v: v,
            },
        }),
        'resize': FunctionType({
            'requiredParams': ['factor'],
        }),
    }
