"""
Logging tests.

Tests for stencil._logging module:
- test_formatters.py: JsonFormatter, HumanFormatter, scoped_logger
- test_config.py: setup_logging() and environment configuration

Maps to: stencil/_logging.py
"""
