"""Platform services (logging) shared across codefence layers."""
