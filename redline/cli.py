"""
Redline CLI - Command-line interface for the engine.

Usage:
    redline tracks                          List circuit layouts
    redline race <name> <name> ... [--seed] Create a race and show the grid
    redline serve [--host] [--port]         Run the HTTP API
"""

import argparse
import logging
import os
import sys


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Redline - Card-Driven Racing Engine",
        prog="redline",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("tracks", help="List circuit layouts")

    race_parser = subparsers.add_parser("race", help="Create a race and show the grid")
    race_parser.add_argument("players", nargs="+", help="Player names")
    race_parser.add_argument("--track", default="oval", help="Track id")
    race_parser.add_argument("--laps", type=int, default=1, help="Number of laps")
    race_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    race_parser.add_argument("--engine", type=int, default=6, help="Starting engine per car")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "8080")))

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "tracks":
        cmd_tracks(args)
    elif args.command == "race":
        cmd_race(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_tracks(args):
    """List circuit layouts."""
    from .games.classic.tracks import TRACKS

    for layout in TRACKS.values():
        corners = ", ".join(str(p) for p in layout.corner_positions)
        print(f"{layout.track_id:<10} {layout.name:<10} {layout.length} spaces, corners at {corners}")


def cmd_race(args):
    """Create a race and print the grid, hands and first turn order."""
    from .games.classic.setup import create_race

    try:
        race = create_race(
            args.players,
            number_of_laps=args.laps,
            track_id=args.track,
            seed=args.seed,
            engine=args.engine,
        )
    except (ValueError, KeyError) as e:
        print(f"Error: {e.args[0] if e.args else e}")
        sys.exit(1)

    print(f"Race {race.race_id} on {race.metadata['track_name']} ({race.board.number_of_laps} lap(s))")
    print("\nGrid:")
    for player in race.players:
        space = race.board.find_car(player.car)
        print(f"  {player.name:<12} {player.car.color:<7} space {race.board.index_of(space)}")

    print("\nHands:")
    for player in race.players:
        names = ", ".join(card.name for card in player.hand.cards)
        print(f"  {player.name:<12} {names}")

    race.board.set_racer_turn_order()
    order = [race.player_for_car(car).name for car in race.board.racer_turn_order]
    print(f"\nTurn order: {' -> '.join(order)}")


def cmd_serve(args):
    """Run the HTTP API with uvicorn."""
    try:
        import uvicorn
    except ImportError:
        print("Error: uvicorn not installed. Install with: pip install uvicorn")
        sys.exit(1)

    uvicorn.run("redline.api.app:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
