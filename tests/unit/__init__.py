"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_base_validator.py: Chain engine and short-circuit rules
    - test_*_validator.py: Typed validator checks
    - test_result.py: Result type and combine()
    - test_catalog_loader.py / test_message_registry.py: Catalog loading and lookup
    - test_failure_mapper.py: Localization and interpolation
"""
