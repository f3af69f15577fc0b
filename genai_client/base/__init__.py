"""Shared infrastructure for the client: errors, logging, HTTP, streaming."""
