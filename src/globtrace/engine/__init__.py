"""Pattern compilation and matching engine."""
