"""
Test suite for the Gymnasium bridge.

This package contains tests for:
- Environment adapter (space metadata, reset/step shapes, error wrapping)
- Runtime guard (lock serialization, error chaining)
- Action marshaling
- Configuration and logging setup
"""
