"""Turn loop and end-of-game scoring."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from rich.console import Console
from rich.panel import Panel

from scrabble.bag import TileBag
from scrabble.board import Board
from scrabble.constants import BINGO_BONUS, DEFAULT_HAND_SIZE, DEFAULT_MIN_WORD_LENGTH, MAX_PLAYERS
from scrabble.dictionary import Dictionary
from scrabble.errors import CommandError, MoveError
from scrabble.move import Move, MoveKind
from scrabble.player import ComputerPlayer, HumanPlayer, Player
from scrabble.render import board_table, hand_text, results_table

log = logging.getLogger("scrabble.game")


@dataclass
class GameConfig:
    board_path: str
    dictionary_path: str
    bag_path: str | None = None
    hand_size: int = DEFAULT_HAND_SIZE
    minimum_word_length: int = DEFAULT_MIN_WORD_LENGTH
    seed: int | None = None


class Game:
    """One game: board, bag, dictionary and the players taking turns."""

    def __init__(
        self,
        board: Board,
        bag: TileBag,
        dictionary: Dictionary,
        hand_size: int = DEFAULT_HAND_SIZE,
        minimum_word_length: int = DEFAULT_MIN_WORD_LENGTH,
        console: Console | None = None,
    ):
        self.board = board
        self.bag = bag
        self.dictionary = dictionary
        self.hand_size = hand_size
        self.minimum_word_length = minimum_word_length
        self.console = console or Console()
        self.players: list[Player] = []

    @classmethod
    def from_config(cls, config: GameConfig, console: Console | None = None) -> Game:
        bag = TileBag.read(config.bag_path, config.seed) if config.bag_path else TileBag.standard(config.seed)
        return cls(
            Board.read(config.board_path),
            bag,
            Dictionary.read(config.dictionary_path),
            config.hand_size,
            config.minimum_word_length,
            console,
        )

    # players

    def add_player(self, player: Player) -> None:
        if len(self.players) >= MAX_PLAYERS:
            raise ValueError(f"at most {MAX_PLAYERS} players")
        player.add_tiles(self.bag.remove_random_tiles(self.hand_size))
        self.players.append(player)

    def add_players_interactive(self, prompt: Callable[[str], str] = input) -> None:
        while True:
            try:
                n = int(prompt("How many players? "))
            except ValueError:
                self.console.print("[red]Please enter a number.[/red]")
                continue
            if 1 <= n <= MAX_PLAYERS:
                break
            self.console.print(f"[red]Between 1 and {MAX_PLAYERS} players, please.[/red]")

        for i in range(n):
            name = prompt(f"Player {i + 1}, what is your name? ").strip() or f"Player {i + 1}"
            answer = prompt(f"Is {name} a computer? (y or n): ").strip().lower()
            if answer == "y":
                self.add_player(ComputerPlayer(name, self.hand_size))
            else:
                if answer != "n":
                    self.console.print("Not y or n, defaulting to human player.")
                self.add_player(HumanPlayer(name, self.hand_size, prompt))

    # turn loop

    def play(self) -> list[Player]:
        """Run the game to completion and return the winner(s)."""
        self.game_loop()
        self.final_subtraction()
        return self.print_result()

    def game_loop(self) -> None:
        """Cycle through players until someone goes out or everyone passes.

        With human players, the game ends once every human has passed in a
        row.  Without any, it ends after a full round of passes.
        """
        humans = sum(1 for p in self.players if p.is_human())
        needed = humans or len(self.players)
        passes = 0

        while True:
            for player in self.players:
                self.console.print(board_table(self.board))
                self.console.print(Panel(hand_text(player.hand), title=player.name))
                move = self._get_valid_move(player)

                if move.kind is MoveKind.PASS:
                    if player.is_human() or not humans:
                        passes += 1
                    if passes >= needed:
                        return
                    continue

                if player.is_human() or not humans:
                    passes = 0
                if move.kind is MoveKind.EXCHANGE:
                    self._exchange(player, move)
                elif self._place(player, move):
                    return
                self.console.print(f"Your current score: [green]{player.points}[/green]")

    def _get_valid_move(self, player: Player) -> Move:
        while True:
            try:
                move = player.get_move(self.board, self.dictionary)
                if move.kind is MoveKind.PLACE:
                    if len(move.tiles) < self.minimum_word_length:
                        raise MoveError("Word too short")
                    result = self.board.test_place(move)
                    if not result.valid:
                        raise MoveError(str(result))
                return move
            except (CommandError, MoveError) as exc:
                if not player.is_human():
                    log.warning("%s produced an unusable move (%s); passing", player.name, exc)
                    return Move.pass_turn()
                self.console.print(f"[red]{exc}[/red]  Try again.")

    def _exchange(self, player: Player, move: Move) -> None:
        player.remove_tiles(move.tiles)
        for tile in move.tiles:
            self.bag.add_tile(tile)
        player.add_tiles(self.bag.remove_random_tiles(len(move.tiles)))

    def _place(self, player: Player, move: Move) -> bool:
        """Commit *move*.  Returns True when the game is over."""
        result = self.board.place(move)
        player.remove_tiles(move.tiles)
        player.add_points(result.points)
        if len(move.tiles) == self.hand_size:
            player.add_points(BINGO_BONUS)
        self.console.print(f"{player.name} played {', '.join(result.words)} "
                           f"and gained [green]{result.points}[/green] points!")

        if player.count_tiles() == 0 and self.bag.count_tiles() == 0:
            return True
        player.add_tiles(self.bag.remove_random_tiles(len(move.tiles)))
        return False

    # end of game

    def final_subtraction(self) -> None:
        """Each player loses the value of their hand; whoever went out gains it all."""
        lost = 0
        out: Player | None = None
        for player in self.players:
            if player.count_tiles():
                lost += player.hand_value()
                player.subtract_points(player.hand_value())
            else:
                out = player
        if out is not None:
            out.add_points(lost)

    def winners(self) -> list[Player]:
        top = max(p.points for p in self.players)
        return [p for p in self.players if p.points == top]

    def print_result(self) -> list[Player]:
        winners = self.winners()
        label = "Winner:" if len(winners) == 1 else "Winners:"
        self.console.print(f"{label} [bold magenta]{', '.join(p.name for p in winners)}[/bold magenta]")
        self.console.print(results_table(self.players))
        return winners
