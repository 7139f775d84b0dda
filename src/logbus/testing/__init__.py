"""Testing – in-memory doubles for the logbus ports."""
