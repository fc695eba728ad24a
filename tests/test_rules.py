"""
Rule model and FunctionType tests.
"""

import pytest
from pydantic import ValidationError

from typeshield import FunctionContract, FunctionType, NumberType, SchemaError, StringType, Types


class TestFunctionType:

    def test_returns_config_unchanged(self):
        config = {'requiredParams': ['a']}

        assert FunctionType(config) is config

    def test_types_namespace(self):
        assert Types.NumberType is NumberType
        assert Types.StringType is StringType
        assert Types.FunctionType is FunctionType


class TestFunctionContract:

    def test_camel_case_keys(self):
        accessor = lambda v: v  # noqa: E731
        contract = FunctionContract.from_entry({
            'requiredParams': ['width', 'height'],
            'requiredAttributes': {'length': accessor, 'unit': None},
        })

        assert contract.required_params == ['width', 'height']
        assert contract.required_attributes == {'length': accessor, 'unit': None}

    def test_snake_case_keys(self):
        contract = FunctionContract.from_entry({'required_params': ['a']})

        assert contract.required_params == ['a']
        assert contract.required_attributes is None

    def test_attribute_names_list(self):
        contract = FunctionContract.from_entry({'requiredAttributes': ['length', 'breadth']})

        assert contract.required_attributes == {'length': None, 'breadth': None}
        assert list(contract.required_attributes) == ['length', 'breadth']

    def test_none_is_an_empty_contract(self):
        contract = FunctionContract.from_entry(None)

        assert contract.required_params is None
        assert contract.required_attributes is None

    def test_existing_contract_is_reused(self):
        contract = FunctionContract(required_params=['a'])

        assert FunctionContract.from_entry(contract) is contract

    def test_non_mapping_entry_is_rejected(self):
        with pytest.raises(SchemaError):
            FunctionContract.from_entry(NumberType())

    def test_non_callable_accessor_is_rejected(self):
        with pytest.raises(ValidationError):
            FunctionContract.from_entry({'requiredAttributes': {'length': 5}})

    def test_contract_is_frozen(self):
        contract = FunctionContract(required_params=['a'])

        with pytest.raises(ValidationError):
            contract.required_params = ['b']
