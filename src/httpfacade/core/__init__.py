"""Core configuration and proxy resolution."""
