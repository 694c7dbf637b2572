"""Core layer: result types, configuration and the composition root."""
