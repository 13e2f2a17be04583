"""Track a Steam friend list over time."""
