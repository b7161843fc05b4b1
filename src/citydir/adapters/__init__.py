"""Adapters – integrations with the directory's HTTP API."""
