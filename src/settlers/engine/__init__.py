"""Rules engine and hex board for the settlers game."""

from .bank import Bank, ResourceStock
from .board import NOT_APPLICABLE, HexBoard, SettlersBoard, standard_board
from .config import GameConfig
from .game_state import GameState, game_state_from_config, initial_game_state
from .hexgrid import BoardCoordinateError, Edge
from .player import Player
from .types import CornerStructure, Faction, Field, Land, Resource, Road, Structure

__all__ = [
    "Bank",
    "ResourceStock",
    "HexBoard",
    "SettlersBoard",
    "NOT_APPLICABLE",
    "GameConfig",
    "GameState",
    "Player",
    "BoardCoordinateError",
    "Edge",
    "CornerStructure",
    "Faction",
    "Field",
    "Land",
    "Resource",
    "Road",
    "Structure",
    "standard_board",
    "initial_game_state",
    "game_state_from_config",
]
