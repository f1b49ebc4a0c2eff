"""Personal task scheduler with a recurrence engine."""
