"""Slackin configuration settings."""

from infrastructure.configuration import Settings

# Create the settings instance
settings = Settings()
