"""
Pure algorithms with no domain-specific dependencies.

Modules:
    search      - Bounded binary search over non-decreasing sequences
    propagation - Value propagation across shared mutable nodes
    dag         - Cycle finding, for checking propagation preconditions
"""
