"""Domain values and API payload models."""
