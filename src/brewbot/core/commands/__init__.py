"""Command routing: registry, dispatcher and brew handlers."""
