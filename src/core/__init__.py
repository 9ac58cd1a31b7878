"""Logging setup and the constant payloads served by the API."""
