from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Callable, List, Optional

from .engine.config import DICE_DROP_VALUE, GameConfig
from .engine.game_state import GameState, game_state_from_config
from .engine.rules import roll_dice
from .engine.types import Coordinate, Faction, Resource, Structure
from .utils.log import configure_logging
from .utils.repro import seed_everything
from .view import render_board

logger = logging.getLogger(__name__)

HELP_TEXT = """
Commands:
  help          Show this help text
  board         Show the board
  resources     Show your resource cards and structures left
  road          Build a road (lumber, brick)
  settlement    Build a settlement (lumber, brick, wool, grain)
  city          Upgrade a settlement to a city (3 ore, 2 grain)
  trade         Trade 4 cards of one kind for 1 of another with the bank
  end           End your turn
  quit          Exit the game
Coordinates are entered as "x y" or "x,y".
""".strip()


class QuitGame(Exception):
    """Raised when a player asks to leave the game."""


class Console:
    """Line based input and output; tests replace the callables."""

    def __init__(
        self,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._read = read
        self._write = write

    def ask(self, prompt: str) -> str:
        return self._read(prompt).strip()

    def say(self, text: str = "") -> None:
        self._write(text)


def parse_coordinate(raw: str) -> Optional[Coordinate]:
    parts = raw.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def parse_resource(raw: str) -> Optional[Resource]:
    value = raw.strip().lower()
    for resource in Resource:
        if value in (resource.value, resource.code.lower()):
            return resource
    return None


def read_coordinate(console: Console, prompt: str) -> Coordinate:
    while True:
        raw = console.ask(prompt)
        if raw.lower() == "quit":
            raise QuitGame()
        coord = parse_coordinate(raw)
        if coord is not None:
            return coord
        console.say('Please enter a coordinate as "x y".')


def read_resource(console: Console, prompt: str) -> Resource:
    while True:
        raw = console.ask(prompt)
        if raw.lower() == "quit":
            raise QuitGame()
        resource = parse_resource(raw)
        if resource is not None:
            return resource
        names = ", ".join(f"{r.value} ({r.code})" for r in Resource)
        console.say(f"Unknown resource. Choose one of: {names}")


def _label(faction: Faction) -> str:
    return f"{faction.name} ({faction.value})"


def _resources_text(state: GameState) -> str:
    player = state.current_player
    cards = ", ".join(f"{res.value}:{player.get(res)}" for res in Resource)
    stock = ", ".join(f"{s.value}s {player.structure_stock(s)}" for s in Structure)
    return f"{_label(player.faction)} | points {player.points} | {cards} | left: {stock}"


def _scoreboard_text(state: GameState) -> List[str]:
    return [f"  {_label(faction)}: {points}" for faction, points in state.scoreboard().items()]


# Initial placement


def _place_initial_buildings(state: GameState, console: Console, payout: bool) -> None:
    name = _label(state.current_player_faction())
    console.say(render_board(state.board))
    while not state.place_initial_settlement(
        read_coordinate(console, f"{name} initial settlement corner: "), payout
    ):
        console.say("That corner is not available. Pick a free corner on land.")

    console.say(render_board(state.board))
    while True:
        start = read_coordinate(console, f"{name} initial road start: ")
        end = read_coordinate(console, f"{name} initial road end: ")
        if state.place_initial_road(start, end):
            break
        console.say("That road cannot be placed. It must touch your settlement or road.")


def initial_phase(state: GameState, console: Console) -> None:
    """Ascending pass without payout, then a descending pass with payout."""
    console.say("The game begins! Place your initial settlements and roads.")
    count = state.player_count
    for index in range(count):
        _place_initial_buildings(state, console, payout=False)
        if index != count - 1:
            state.switch_to_next_player()
    for index in range(count):
        _place_initial_buildings(state, console, payout=True)
        if index != count - 1:
            state.switch_to_previous_player()
    console.say("All initial buildings have been placed.")


# Turns


def _announce_roll(state: GameState, console: Console, value: int) -> None:
    name = _label(state.current_player_faction())
    console.say(f"{name} rolled {value}.")
    payout = state.throw_dice(value)
    for faction, cards in payout.items():
        if cards:
            console.say(f"  {_label(faction)} receives {', '.join(c.value for c in cards)}")
    if value == DICE_DROP_VALUE:
        console.say(render_board(state.board))
        while not state.place_thief_and_steal_card(
            read_coordinate(console, f"{name} move the thief to field: ")
        ):
            console.say("The thief must go on a land field.")


def _build(state: GameState, console: Console, command: str) -> bool:
    name = _label(state.current_player_faction())
    if command == "road":
        start = read_coordinate(console, f"{name} road start: ")
        end = read_coordinate(console, f"{name} road end: ")
        return state.build_road(start, end)
    corner = read_coordinate(console, f"{name} {command} corner: ")
    if command == "settlement":
        return state.build_settlement(corner)
    return state.build_city(corner)


def play_turn(state: GameState, console: Console, rng: random.Random) -> Optional[Faction]:
    """Run one turn and return the winner if the game ended during it."""
    _announce_roll(state, console, roll_dice(rng))
    name = _label(state.current_player_faction())
    while True:
        command = console.ask(f"{name}> ").lower()
        if command == "help":
            console.say(HELP_TEXT)
        elif command == "board":
            console.say(render_board(state.board))
        elif command == "resources":
            console.say(_resources_text(state))
        elif command in ("road", "settlement", "city"):
            if not _build(state, console, command):
                console.say(f"Cannot build a {command} there.")
                continue
            console.say(f"{command.capitalize()} built.")
            winner = state.get_winner()
            if winner is not None:
                return winner
        elif command == "trade":
            offer = read_resource(console, "Offer 4 of: ")
            want = read_resource(console, "Receive 1 of: ")
            if state.trade_with_bank_four_to_one(offer, want):
                console.say(f"Traded 4 {offer.value} for 1 {want.value}.")
            else:
                console.say("Trade not possible.")
        elif command == "end":
            state.switch_to_next_player()
            return None
        elif command == "quit":
            raise QuitGame()
        elif command:
            console.say("Unknown command. Type 'help'.")


def end_phase(state: GameState, console: Console, winner: Optional[Faction]) -> None:
    if winner is not None:
        console.say(f"{_label(winner)} wins the game!")
    console.say("Scoreboard:")
    for line in _scoreboard_text(state):
        console.say(line)


def play(state: GameState, console: Console, rng: random.Random) -> Optional[Faction]:
    """Run a whole game; returns the winner, or None when a player quit."""
    winner: Optional[Faction] = None
    try:
        initial_phase(state, console)
        while winner is None:
            winner = play_turn(state, console, rng)
    except QuitGame:
        console.say("Game aborted.")
    end_phase(state, console, winner)
    return winner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="settlers-play", description="Play settlers on the console")
    parser.add_argument("--win-points", type=int, default=GameConfig.win_points)
    parser.add_argument("--players", type=int, default=GameConfig.num_players)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default=None)
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        configure_logging(args.log_level)
        config = GameConfig(win_points=args.win_points, num_players=args.players, seed=args.seed)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    if config.seed is not None:
        seed_everything(config.seed)
    state = game_state_from_config(config)
    console = console or Console()
    logger.info("Starting game with %d players to %d points", config.num_players, config.win_points)
    console.say("Settlers - type 'help' during your turn for commands")
    try:
        play(state, console, state.rng)
    except (EOFError, KeyboardInterrupt):
        console.say("\nExiting")
    return 0


if __name__ == "__main__":
    sys.exit(main())
