"""Configuration loading and portable path policy."""
