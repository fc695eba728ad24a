"""
Constructor argument validation tests.

Order of checks:
1. Argument must be a mapping (raised)
2. Required constructor parameters must be present (raised)
3. Supplied fields are validated (returned, never raised)
"""

import pytest

from typeshield import (
    CONSTRUCTOR_PARAMETERS_KEY,
    ErrorCode,
    FunctionType,
    InvalidArgumentError,
    MissingConstructorParameters,
    NumberType,
    StringType,
    validate_object_construction,
)


@pytest.fixture
def schema():
    return {
        CONSTRUCTOR_PARAMETERS_KEY: ['length', 'breadth'],
        'length': NumberType({'range': [1, 100]}),
        'breadth': NumberType(),
        'unit': StringType({'oneOf': ['cm', 'm']}),
    }


# =============================================================================
# STRUCTURAL ERRORS (raised)
# =============================================================================

class TestStructuralErrors:

    @pytest.mark.parametrize("argument", [None, 5, "length=5", ['length']])
    def test_non_mapping_argument_raises(self, schema, argument):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_object_construction(argument, schema)

        assert 'Must pass a valid object to the constructor function.' in str(exc_info.value)
        assert exc_info.value.received_value == argument

    def test_invalid_argument_is_a_type_error(self, schema):
        with pytest.raises(TypeError):
            validate_object_construction(None, schema)

    def test_missing_required_parameter_raises(self, schema):
        with pytest.raises(MissingConstructorParameters) as exc_info:
            validate_object_construction({'length': 5, 'unit': 'cm'}, schema)

        error = exc_info.value
        assert error.expected == ['length', 'breadth']
        assert error.received == ['length', 'unit']
        assert error.missing == ['breadth']
        assert str(error) == (
            "Mismatch constructor argument. Expected length, breadth "
            "but only got length, unit."
        )

    def test_missing_parameters_checked_before_fields(self, schema):
        # length is invalid too, but the missing breadth wins
        with pytest.raises(MissingConstructorParameters):
            validate_object_construction({'length': 500}, schema)


# =============================================================================
# FIELD VALIDATION (returned)
# =============================================================================

class TestFieldValidation:

    def test_valid_argument(self, schema):
        result = validate_object_construction({'length': 5, 'breadth': 4}, schema)

        assert result.error is False
        assert result.error_payload == {}

    def test_invalid_field_is_collected(self, schema):
        result = validate_object_construction({'length': 500, 'breadth': 4}, schema)

        assert result.error is True
        assert list(result.error_payload) == ['length']
        assert result.error_payload['length'].payload == {ErrorCode.OUT_OF_RANGE: [1, 100]}

    def test_all_invalid_fields_are_collected(self, schema):
        result = validate_object_construction(
            {'length': 0, 'breadth': 'wide', 'unit': 'km'}, schema
        )

        assert list(result.error_payload) == ['length', 'breadth', 'unit']
        assert result.error_payload['unit'].valid_string_types == ['cm', 'm']

    def test_keys_without_schema_entry_are_ignored(self, schema):
        result = validate_object_construction(
            {'length': 5, 'breadth': 4, 'color': object()}, schema
        )

        assert result.error is False

    def test_absent_optional_fields_are_skipped(self):
        result = validate_object_construction(
            {'length': 5},
            {'length': NumberType(), 'unit': StringType({'minLength': 1})},
        )

        assert result.error is False
        assert 'unit' not in result.error_payload

    def test_method_contracts_are_not_fields(self):
        result = validate_object_construction(
            {'calculate_area': 'not a number'},
            {'calculate_area': FunctionType({'requiredParams': []})},
        )

        assert result.error is False

    def test_to_dict_shape(self, schema):
        result = validate_object_construction({'length': 500, 'breadth': 4}, schema)

        assert result.to_dict() == {
            'error': True,
            'errorPayload': {
                'length': {'error': True, 'payload': {300: [1, 100]}},
            },
        }
