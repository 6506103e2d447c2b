"""Core shared values for the vanity import server."""
SERVICE_NAME = "vanity"
