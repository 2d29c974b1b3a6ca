"""Strike-zone rule-change impact analysis over Statcast pitch data."""
