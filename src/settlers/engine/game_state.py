from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .bank import Bank
from .board import SettlersBoard, standard_board
from .config import GameConfig
from .types import Coordinate, Faction, Resource
from .player import Player


@dataclass
class GameState:
    board: SettlersBoard
    bank: Bank
    players: List[Player]
    required_win_points: int
    current_player_index: int = 0
    rng: random.Random = field(default_factory=random.Random)

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    def current_player_faction(self) -> Faction:
        return self.current_player.faction

    def current_player_resource_stock(self, resource: Resource) -> int:
        return self.current_player.get(resource)

    def player_factions(self) -> List[Faction]:
        return [player.faction for player in self.players]

    def player_for(self, faction: Faction) -> Player:
        for player in self.players:
            if player.faction is faction:
                return player
        raise ValueError(f"No player plays {faction}")

    def scoreboard(self) -> Dict[Faction, int]:
        return {player.faction: player.points for player in self.players}

    def switch_to_next_player(self) -> None:
        self.current_player_index = (self.current_player_index + 1) % self.player_count

    def switch_to_previous_player(self) -> None:
        self.current_player_index = (self.current_player_index - 1) % self.player_count

    def place_initial_settlement(self, corner: Coordinate, payout: bool) -> bool:
        from .rules import place_initial_settlement

        return place_initial_settlement(self, corner, payout)

    def place_initial_road(self, a: Coordinate, b: Coordinate) -> bool:
        from .rules import place_initial_road

        return place_initial_road(self, a, b)

    def build_settlement(self, corner: Coordinate) -> bool:
        from .rules import build_settlement

        return build_settlement(self, corner)

    def build_city(self, corner: Coordinate) -> bool:
        from .rules import build_city

        return build_city(self, corner)

    def build_road(self, a: Coordinate, b: Coordinate) -> bool:
        from .rules import build_road

        return build_road(self, a, b)

    def trade_with_bank_four_to_one(self, offer: Resource, want: Resource) -> bool:
        from .rules import trade_with_bank_four_to_one

        return trade_with_bank_four_to_one(self, offer, want)

    def throw_dice(self, value: int) -> Dict[Faction, List[Resource]]:
        from .rules import throw_dice

        return throw_dice(self, value)

    def place_thief_and_steal_card(self, field_coord: Coordinate) -> bool:
        from .rules import place_thief_and_steal_card

        return place_thief_and_steal_card(self, field_coord)

    def get_winner(self) -> Optional[Faction]:
        from .rules import get_winner

        return get_winner(self)


def initial_game_state(
    win_points: int,
    num_players: int = 4,
    rng: Optional[random.Random] = None,
    board: Optional[SettlersBoard] = None,
    bank: Optional[Bank] = None,
) -> GameState:
    """Fresh game on the standard board with players in faction order."""
    config = GameConfig(win_points=win_points, num_players=num_players)
    if rng is None:
        rng = random.Random()
    factions = list(Faction)[: config.num_players]
    return GameState(
        board=board if board is not None else standard_board(),
        bank=bank if bank is not None else Bank(),
        players=[Player(faction, rng=rng) for faction in factions],
        required_win_points=config.win_points,
        current_player_index=0,
        rng=rng,
    )


def game_state_from_config(config: GameConfig) -> GameState:
    return initial_game_state(
        config.win_points, config.num_players, rng=random.Random(config.seed)
    )
