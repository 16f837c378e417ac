"""Order service: domain model, MySQL storage and an HTTP API for customer orders."""

__version__ = "0.1.0"