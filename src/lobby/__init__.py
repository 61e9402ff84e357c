"""Game lobby backend: users, game registrations and room lifecycle."""

__version__ = "0.1.0"
