"""Core: configuration, domain, errors, interfaces and the provider service."""
