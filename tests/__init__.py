"""
Test Package

Contains unit tests for all modules.
Run with: pytest tests/ -v

Test files follow the pattern:
    test_<module_name>.py

Example:
    tests/test_schema.py         - Tests for songformat/data/schema.py
    tests/test_serialization.py  - Tests for songformat/data/serialization.py
    tests/test_tuning.py         - Tests for songformat/rules/tuning.py
"""
