"""
Test Suite for Checkchain.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Validation through to localized messages
    - fixtures/: Sample catalogs

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/checkchain             # With coverage
"""
