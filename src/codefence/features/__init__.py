"""Feature packages for codefence."""
