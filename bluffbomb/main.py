"""Main game loop and CLI."""

import argparse
import logging

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .cards import DECK_COMPOSITION
from .config import GameSettings
from .console import ConsoleHuman, ConsoleRenderer
from .errors import BluffBombError
from .formatting import h2
from .game import GameState, create_game_from_settings
from .rounds import RoundEngine

console = Console()


def display_rules() -> None:
    """Explain the rules before the first deal."""
    composition = ", ".join(f"{count} {card.value}" for card, count in DECK_COMPOSITION.items())
    console.print(
        Panel(
            "\n".join(
                [
                    f"Deck: {composition}. Everyone gets 5 cards each round.",
                    "Each round has a focus card (Sun, Star or Moon). Magic matches any focus.",
                    "On your turn, play 1-3 cards face down and claim they match the focus.",
                    "The next player may question your play. The cards are revealed:",
                    "  • wrong cards: the player who played them faces the bomb",
                    "  • right cards: the questioner faces the bomb",
                    "The bomb kills 1 time in 3. Survive it twice and the third one always explodes.",
                    "With two players left, emptying your hand forces the other to question you.",
                ]
            ),
            title="💣 BOMB BLUFF",
            border_style="cyan",
        )
    )


def display_game_end(game: GameState) -> None:
    """Display final standings."""
    console.print(h2("Final standings"))
    table = Table(title="Players")
    table.add_column("Name", style="cyan")
    table.add_column("Status")
    table.add_column("Cards left", justify="right")
    table.add_column("Bomb survivals", justify="right")

    for player in game.players:
        status = "[green]alive[/green]" if player.alive else "[red]dead[/red]"
        table.add_row(
            player.name,
            status,
            str(len(player.hand)),
            str(game.survival.count(player.index)),
        )
    console.print(table)


def run_game(settings: GameSettings) -> GameState:
    """Create a game from settings and play it to the end."""
    game = create_game_from_settings(settings)
    human = None if settings.spectate else ConsoleHuman(console)
    engine = RoundEngine(
        sink=ConsoleRenderer(console, delay=settings.delay),
        move_provider=human,
        question_decider=human,
    )

    display_rules()
    engine.play_game(game)
    display_game_end(game)
    return game


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="BOMB BLUFF - a bluffing card game against three bots",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Play a game:
    bluffbomb

  Replay a specific shuffle:
    bluffbomb --seed 42

  Watch four bots play:
    bluffbomb --spectate --delay 0.5

Settings can also come from BLUFFBOMB_* variables in the environment or a .env file.
""",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random source")
    parser.add_argument("--name", default=None, help="Your name at the table (default: Human)")
    parser.add_argument(
        "--spectate",
        action="store_true",
        default=None,
        help="Let a bot take your seat and watch the game",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Delay after each play and bomb check in seconds (default: 0)",
    )
    parser.add_argument("--verbose", action="store_true", help="Show engine debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    try:
        settings = GameSettings.from_env(
            seed=args.seed,
            human_name=args.name,
            spectate=args.spectate,
            delay=args.delay,
        )
        run_game(settings)
    except ValidationError as e:
        console.print(f"[red]Invalid settings: {e}[/red]")
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Game interrupted by user[/yellow]")
        return 0
    except BluffBombError as e:
        console.print(f"[red]Engine error: {e}[/red]")
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
