#!/usr/bin/env python3
"""
__main__.py
-----------
Command line entry point.

Usage:
    python -m invaders                   # Play
    python -m invaders --seed 7          # Reproducible enemy fire
    python -m invaders --mute --scale 4
    python -m invaders --max-frames 600  # Quit after ~10 seconds
"""

import sys
import argparse

from invaders.audio.sound_manager import AudioLoadError
from invaders.core.services.config_manager import load_config
from invaders.game import DEFAULT_CONFIG, Game


def build_parser():
    parser = argparse.ArgumentParser(prog="invaders", description="Minimal 2D arcade shooter")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for enemy fire randomness")
    parser.add_argument("--scale", type=int, default=None,
                        help="Integer window scale factor")
    parser.add_argument("--mute", action="store_true",
                        help="Disable audio")
    parser.add_argument("--log-level", default=None,
                        choices=["NONE", "ERROR", "WARN", "INFO", "VERBOSE"],
                        help="Console log verbosity")
    parser.add_argument("--max-frames", type=int, default=None,
                        help="Stop after this many frames")
    parser.add_argument("--config", default="settings.json",
                        help="Settings JSON file")
    return parser


def build_config(args):
    """Load the settings file and apply command line overrides."""
    config = load_config(args.config, DEFAULT_CONFIG)
    if args.scale is not None:
        config["display"]["scale"] = args.scale
    if args.mute:
        config["audio"]["enabled"] = False
    if args.log_level is not None:
        config["logging"]["level"] = args.log_level
    return config


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    game = Game(build_config(args), seed=args.seed, max_frames=args.max_frames)
    try:
        game.run()
    except AudioLoadError as e:
        print(f"invaders: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
