"""Services: orchestration on top of the adapters."""
