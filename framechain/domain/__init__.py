"""Domain layer: frames, frame chains and the ContextualError exception."""
