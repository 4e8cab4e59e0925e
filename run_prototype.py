#!/usr/bin/env python3
"""Simple CLI runner for exercising the GRIDCASTER movement and camera core."""

import asyncio
import sys

from engine.config import GridcasterConfig
from engine.exceptions import TileLookupError
from engine.frame import GameState, create_game_state
from engine.input import InputIntent, KeyEventType, handle_key_event
from engine.logging import configure_logging, get_logger
from engine.loop import FrameLoop
from engine.render import AsciiRenderer, surface_scale

logger = get_logger(__name__)

# (key codes held, frames to hold them)
DEMO_SCRIPT = [
    (("KeyW",), 30),
    (("KeyD",), 40),
    (("KeyW", "KeyD"), 30),
    (("KeyS",), 60),
    (("KeyA",), 200),
]


def print_status(state: GameState):
    """Print player and camera plane state."""
    player = state.player
    plane = state.camera_plane
    print(f"  position:  ({player.position.x:.3f}, {player.position.y:.3f})")
    print(f"  direction: ({player.direction.x:.3f}, {player.direction.y:.3f})")
    print(f"  plane:     left=({plane.left.x:.3f}, {plane.left.y:.3f}) "
          f"right=({plane.right.x:.3f}, {plane.right.y:.3f})")
    try:
        tile = state.level.tile(player.position)
    except TileLookupError:
        # Standing on the far edge of the level
        tile = None
    print(f"  tile:      {tile or '-'}")


async def run_demo():
    """Drive the player through a scripted key sequence."""
    config = GridcasterConfig()
    configure_logging(config.log_level)

    state = create_game_state(config)
    logger.info("demo.started", pixels_per_cell=surface_scale(config, state.level))

    intent = InputIntent()
    renderer = AsciiRenderer()
    loop = FrameLoop(state, intent, renderer=renderer, target_fps=config.target_fps)

    try:
        for codes, frames in DEMO_SCRIPT:
            for code in codes:
                handle_key_event(intent, KeyEventType.KEYDOWN, code)

            await loop.run(max_frames=frames)

            for code in codes:
                handle_key_event(intent, KeyEventType.KEYUP, code)

            print(f"\nAfter holding {'+'.join(codes)} for {frames} frames:")
            print(renderer)
            print_status(state)

        logger.info("demo.completed", frames_run=loop.frames_run)

    except Exception as e:
        logger.error("demo.failed", error=str(e), exc_info=True)
        raise


async def interactive_mode():
    """Run an interactive REPL that feeds key events to the core."""
    config = GridcasterConfig()
    configure_logging(config.log_level)

    state = create_game_state(config)
    intent = InputIntent()
    renderer = AsciiRenderer()
    loop = FrameLoop(state, intent, renderer=renderer, target_fps=config.target_fps)

    print("\n" + "=" * 60)
    print("GRIDCASTER Interactive Mode")
    print("=" * 60)
    print("\nCommands:")
    print("  press <code>   - Press a key (KeyW, KeyA, KeyS, KeyD)")
    print("  release <code> - Release a key")
    print("  step [n]       - Run n frames (default 1)")
    print("  map            - Show the top-down map")
    print("  status         - Show player and camera state")
    print("  quit           - Exit")
    print()

    while True:
        try:
            cmd = input("> ").strip()

            if not cmd:
                continue

            parts = cmd.split(maxsplit=1)
            command = parts[0].lower()

            if command == "quit":
                break
            elif command in ("press", "release"):
                if len(parts) < 2:
                    print(f"Usage: {command} <code>")
                else:
                    event_type = KeyEventType.KEYDOWN if command == "press" else KeyEventType.KEYUP
                    handle_key_event(intent, event_type, parts[1])
                    print(f"Intent: {intent}")
            elif command == "step":
                try:
                    frames = int(parts[1]) if len(parts) > 1 else 1
                except ValueError:
                    print("Invalid frame count")
                    continue
                await loop.run(max_frames=frames)
                print_status(state)
            elif command == "map":
                if not renderer.frame:
                    renderer(state)
                print(renderer)
            elif command == "status":
                print_status(state)
            else:
                print(f"Unknown command: {command}")

        except KeyboardInterrupt:
            print("\nUse 'quit' to exit")
        except EOFError:
            break


def main():
    """Main entry point."""
    if len(sys.argv) > 1 and sys.argv[1] == "--interactive":
        asyncio.run(interactive_mode())
    else:
        asyncio.run(run_demo())


if __name__ == "__main__":
    main()
