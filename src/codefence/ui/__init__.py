"""User interfaces for codefence."""
