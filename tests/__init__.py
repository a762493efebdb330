"""
Jive Test Suite

This package contains unit tests for the Jive JSON collection utilities.

"""

__all__ = [
    "test_nodes",
    "test_factory",
    "test_collectors",
    "test_jive",
    "test_pointer",
    "test_safe_execution",
]
