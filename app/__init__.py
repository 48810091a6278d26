"""Health service application package."""
