"""Terminal front end for the sliding puzzle engine."""
