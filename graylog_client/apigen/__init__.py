"""Generate a Python client module from a Swagger 1.2 API description."""
