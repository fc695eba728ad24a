"""
Enforcement mode configuration.

STRICT (default): data-shape violations reject the call. The factory raises
ConstructionRejected and intercepted methods return the failing result
without running.

WARN: data-shape violations are logged and the call proceeds. Structural
errors (non-mapping arguments, missing constructor parameters, missing
method parameters) are enforced in both modes.

Usage:
    # Roll out validation without breaking callers
    export TYPESHIELD_MODE=warn
"""

import os
from enum import Enum
from typing import Optional


class EnforcementMode(Enum):
    """Contract enforcement mode."""
    STRICT = "strict"  # Reject on violations (default)
    WARN = "warn"      # Log violations, don't fail


MODE_ENV_VAR = "TYPESHIELD_MODE"

# Process-wide override, set via set_global_mode()
_global_mode: Optional[EnforcementMode] = None


def _get_default_mode() -> EnforcementMode:
    """Get enforcement mode from environment."""
    mode = os.environ.get(MODE_ENV_VAR, 'strict').strip().lower()
    return EnforcementMode.WARN if mode == 'warn' else EnforcementMode.STRICT


def get_mode(override: Optional[EnforcementMode] = None) -> EnforcementMode:
    """
    Resolve the mode for a single call.

    Precedence: per-type override, then global override, then environment.
    """
    if override is not None:
        return override
    if _global_mode is not None:
        return _global_mode
    return _get_default_mode()


def set_global_mode(mode: EnforcementMode) -> None:
    """Set enforcement mode for every wrapped type without a pinned mode."""
    global _global_mode
    _global_mode = EnforcementMode(mode)


def reset_global_mode() -> None:
    """Drop the global override so the environment decides again."""
    global _global_mode
    _global_mode = None
