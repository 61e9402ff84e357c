"""Domain layer - aggregates, value objects and repository interfaces.

Bounded contexts:
- user: player identity (email, nickname, linked identity providers)
- game: registered games and their capacity bounds
- room: the room aggregate, its players and lifecycle events
"""
