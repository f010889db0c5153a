"""Adapters: HTTP, session cache and HTML rendering (infrastructure details)."""
