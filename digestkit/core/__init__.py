"""Core digest types, configuration and exceptions."""
