"""Two-player race-and-wall game on hexagonal boards: boards, rules, players and a game server."""

__version__ = "0.1.0"