"""Shared constants for the job posting wizard."""
