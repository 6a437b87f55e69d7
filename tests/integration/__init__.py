"""
Integration Tests - Validation to Localized Message.

These tests run validators against the packaged catalog to verify that
every failure a chain can produce renders into complete user-facing copy.
"""
