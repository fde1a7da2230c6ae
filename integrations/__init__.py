"""Clients for external services used by the job posting wizard."""
