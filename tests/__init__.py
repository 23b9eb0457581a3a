"""Test package for News Chat.

Structure:
    - unit/: Controller, config, schema and formatting tests in isolation
    - integration/: HTTP client and full conversations against a fake service

The fake news service is a FastAPI app served in-process through
httpx.ASGITransport. No network access is needed.
"""
