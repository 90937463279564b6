"""
Integration tests for MediScan.

Exercise the FastAPI application end-to-end with TestClient and a stubbed
upstream (no network access).
"""
