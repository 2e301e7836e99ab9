"""Adapters layer - Concrete implementations of ports.

Connects the cache to preference sources:
- in-memory mappings and sessions
- JSON files
- environment variables
- HTTP APIs
"""
