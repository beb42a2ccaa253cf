"""HTTP API for Nexus.

Run with:
    uvicorn nexus.api.app:app
"""
