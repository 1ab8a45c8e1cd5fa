# tinysha Test Suite
"""
Test suite including:
- Unit tests for each hashing stage
- Digest encoding tests
- Security tests (bit sensitivity, invalid inputs, reference cross-check)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
