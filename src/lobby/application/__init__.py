"""Application layer - use-cases orchestrating the lobby domain.

Commands mutate state (create/join/leave/close rooms, readiness, user and
game registration); queries only read.
"""
