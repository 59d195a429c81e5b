"""
Capability string constants for pylars.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from pylars.core.capabilities import (
        CAPABILITY_ELEMENTWISE,
        CAPABILITY_VECTOR_MATRIX_ELEMENTWISE,
    )

    if m.supports(CAPABILITY_VECTOR_MATRIX_ELEMENTWISE):
        product = m * v
"""

# Elementwise + - * / between two operands of the same type and shape
CAPABILITY_ELEMENTWISE = 'elementwise'

# Elementwise + - * / against a real scalar
CAPABILITY_SCALAR = 'scalar'

# In-place transpose and reshape (Matrix only)
CAPABILITY_RESHAPE = 'reshape'

# Elementwise arithmetic between a Vector and a Matrix. Reserved: the
# broadcast rule (matching total element count, row-wise, column-wise)
# has not been defined, so no type reports it as supported.
CAPABILITY_VECTOR_MATRIX_ELEMENTWISE = 'vector_matrix_elementwise'

# All capabilities as a frozenset for validation
ALL_CAPABILITIES = frozenset({
    CAPABILITY_ELEMENTWISE,
    CAPABILITY_SCALAR,
    CAPABILITY_RESHAPE,
    CAPABILITY_VECTOR_MATRIX_ELEMENTWISE,
})

VECTOR_CAPABILITIES = frozenset({
    CAPABILITY_ELEMENTWISE,
    CAPABILITY_SCALAR,
})

MATRIX_CAPABILITIES = frozenset({
    CAPABILITY_ELEMENTWISE,
    CAPABILITY_SCALAR,
    CAPABILITY_RESHAPE,
})

__all__ = [
    'CAPABILITY_ELEMENTWISE',
    'CAPABILITY_SCALAR',
    'CAPABILITY_RESHAPE',
    'CAPABILITY_VECTOR_MATRIX_ELEMENTWISE',
    'ALL_CAPABILITIES',
    'VECTOR_CAPABILITIES',
    'MATRIX_CAPABILITIES',
]
