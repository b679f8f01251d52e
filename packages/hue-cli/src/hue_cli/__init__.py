"""Hue CLI - pair with a bridge and show its configuration."""
