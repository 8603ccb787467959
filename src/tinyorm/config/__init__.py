"""Configuration, constants and logging setup for tinyorm."""
