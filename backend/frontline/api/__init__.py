from .server import create_app, get_game_service

__all__ = ["create_app", "get_game_service"]
