"""
Error codes and issue kinds - SINGLE SOURCE OF TRUTH

Every validator reports failures through these two closed enumerations.
The numeric codes are part of the public result shape (payload keys and
method-level ``code`` values), so DO NOT renumber them.
"""

from enum import Enum, IntEnum


# =============================================================================
# NUMERIC ERROR CODES
# =============================================================================

class ErrorCode(IntEnum):
    """Numeric failure codes shared across all validators."""
    NULL_OR_UNDEFINED = 100
    NAN = 200
    OUT_OF_RANGE = 300
    MISMATCH_PARAMETERS = 400
    UNDEFINED_OR_NULL_ATTRIBUTES = 500


# =============================================================================
# ISSUE KINDS (uniform failure discriminator)
# =============================================================================

class IssueKind(str, Enum):
    """Discriminator for a single validation failure."""
    NULL_OR_UNDEFINED = "null_or_undefined"
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"
    OUT_OF_STRING_RANGE = "out_of_string_range"
    NOT_IN_ALLOW_LIST = "not_in_allow_list"

    @property
    def code(self):
        """Numeric code for this kind, or None for string-rule kinds."""
        return _KIND_TO_CODE.get(self)


_KIND_TO_CODE = {
    IssueKind.NULL_OR_UNDEFINED: ErrorCode.NULL_OR_UNDEFINED,
    IssueKind.NOT_A_NUMBER: ErrorCode.NAN,
    IssueKind.OUT_OF_RANGE: ErrorCode.OUT_OF_RANGE,
}


PARAMETERS_MISSING_MESSAGE = 'Parameters missing.'
