"""Core building blocks: constants, exceptions, protocols and configuration."""
