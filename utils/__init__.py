"""Small helpers shared by the job posting wizard."""
