"""Core data model for a persistent coding-agent memory: observations, beliefs, scoring, events and encryption."""

__version__ = "2.1.0"