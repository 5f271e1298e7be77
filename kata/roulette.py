"""A two-player game of chance with a six-chamber revolver."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

__all__ = ["Player", "Shot", "Roulette", "main"]

CHAMBERS = 6
MAX_BULLETS = 3

_GUIDE = (
    "=== RUSSIAN ROULETTE GUIDE ===\n"
    "1. Use Option 2 to set bullet count (Default: 1).\n"
    "2. Use Option 3 to randomize who shoots first.\n"
    "3. Use Option 1 to Start. Press Enter to shoot.\n"
    "------------------------------"
)
_MENU = "\n1. Start Game\n2. Select Bullets (Max 3)\n3. Randomize Turn\n> "


class Player(IntEnum):
    """The two sides of the game."""

    COMPUTER = 0
    YOU = 1

    @property
    def other(self) -> Player:
        """The opponent."""
        return Player.YOU if self is Player.COMPUTER else Player.COMPUTER


@dataclass(frozen=True)
class Shot:
    """One pull of the trigger."""

    player: Player
    chamber: int
    fired: bool

    @property
    def winner(self) -> Player | None:
        """The player left standing if this shot fired, else None."""
        return self.player.other if self.fired else None


class Roulette:
    """Game state: bullet count, who shoots first and the loaded cylinder."""

    def __init__(self, bullets: int = 1, rng: random.Random | None = None) -> None:
        if not 1 <= bullets <= MAX_BULLETS:
            raise ValueError(f"bullets must be between 1 and {MAX_BULLETS}, got {bullets}")
        self.bullets = bullets
        self.rng = rng if rng is not None else random.Random()
        self.turn = Player.COMPUTER
        self.cylinder: tuple[bool, ...] = (False,) * CHAMBERS

    def set_bullets(self, count: int) -> None:
        """Set the bullet count; an invalid count resets it to 1 and raises ValueError."""
        if not 1 <= count <= MAX_BULLETS:
            self.bullets = 1
            raise ValueError(f"bullets must be between 1 and {MAX_BULLETS}, got {count}")
        self.bullets = count

    def randomize_turn(self) -> Player:
        """Pick at random who shoots first."""
        self.turn = Player(self.rng.randrange(2))
        return self.turn

    def load(self) -> tuple[bool, ...]:
        """Spin the cylinder, placing the bullets in distinct random chambers."""
        loaded = set(self.rng.sample(range(CHAMBERS), self.bullets))
        self.cylinder = tuple(chamber in loaded for chamber in range(CHAMBERS))
        return self.cylinder

    def play(self) -> Iterator[Shot]:
        """Load the cylinder and yield shots, alternating players, until one fires."""
        self.load()
        current = self.turn
        chamber = 0
        while True:
            fired = self.cylinder[chamber]
            yield Shot(player=current, chamber=chamber, fired=fired)
            if fired:
                return
            chamber = (chamber + 1) % CHAMBERS
            current = current.other


def _read_line() -> str | None:
    line = sys.stdin.readline()
    return line if line else None


def _read_int(line: str) -> int | None:
    tokens = line.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def _play_round(game: Roulette) -> None:
    print("Spinning cylinder... Game ON.")
    shots = game.play()
    current = game.turn
    for shot in shots:
        if current is Player.YOU:
            print("\nYour turn. Press Enter to shoot...", end="", flush=True)
            _read_line()
        else:
            print("\nComputer's turn... ", end="")
        if shot.fired:
            print("BANG!!!")
            print("Player 2 won." if shot.winner is Player.YOU else "Computer wins.")
        else:
            print("Click. (Safe)")
            current = current.other


def main(argv: list[str] | None = None) -> int:
    """Run the interactive game on standard input and output."""
    parser = argparse.ArgumentParser(description="Russian roulette against the computer.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    args = parser.parse_args(argv)

    game = Roulette(rng=random.Random(args.seed))
    print(_GUIDE)
    while True:
        print(_MENU, end="", flush=True)
        line = _read_line()
        if line is None:
            break
        choice = _read_int(line)
        if choice is None:
            continue
        if choice == 2:
            print("Enter bullets (1-3): ", end="", flush=True)
            answer = _read_line()
            count = _read_int(answer) if answer is not None else None
            try:
                game.set_bullets(count if count is not None else 0)
            except ValueError:
                print("Invalid. Reset to 1.")
        elif choice == 3:
            if game.randomize_turn() is Player.YOU:
                print("Player 2 (You) start.")
            else:
                print("Player 1 (Computer) starts.")
        elif choice == 1:
            _play_round(game)
        else:
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())