"""Core interfaces.

- Protocol contracts implemented by adapters and by the provider itself.
- The core depends on these abstractions, never on httpx or Jinja2.
"""
