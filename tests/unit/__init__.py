"""Unit tests for individual components in isolation.

Coverage:
    - test_session_controller: Session lifecycle, busy gate and error turns
    - test_config: Configuration validation
    - test_schemas: Pydantic validation and serialization
    - test_formatting: Pure display helpers

Uses AsyncMock in place of the HTTP client.
"""
