"""API tests package.

End-to-end tests for REST API endpoints using TestClient.
Tests the complete request/response cycle including:
- Coded enum binding from query parameters and JSON bodies
- Response serialization
- RFC 7807 error responses
- Generated OpenAPI document
"""
