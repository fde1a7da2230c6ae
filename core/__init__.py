"""Core package for the job posting wizard: enums, mapping and validation."""
