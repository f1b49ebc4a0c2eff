"""Domain services: recurrence engine, lifecycle policy, validation."""
