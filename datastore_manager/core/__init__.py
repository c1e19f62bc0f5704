"""Core module - shared kernel for the data store manager."""
