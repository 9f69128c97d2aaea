"""Test suite for the coded enums API.

Test structure follows the test pyramid:
- unit/: Unit tests - Test domain logic, adapters and presentation helpers in isolation
- api/: API endpoint tests - Test HTTP endpoints and the OpenAPI document end-to-end
"""
