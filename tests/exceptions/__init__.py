"""
Exception handling tests.

Tests for stencil.exceptions module:
- Hierarchy and builtin base classes
- Stable error codes and structured details

Maps to: stencil/exceptions/
"""
