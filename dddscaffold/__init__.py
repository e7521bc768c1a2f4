"""Domain-driven design building blocks for users and tenants, and a scaffolding command-line tool."""

__version__ = "1.0.0"