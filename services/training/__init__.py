"""Model training for season win percentage."""
