#!/usr/bin/env python3
"""
RETRO KOMBAT - 2 Player Fighting Game
=====================================
Entry point untuk game.

Jalankan: python -m retro_kombat.main  (atau: retro-kombat)
"""

import argparse
import logging

from .config import GAME_TITLE, FPS


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="retro-kombat",
        description="Retro 2-player fighting game",
        epilog=(
            "Player 1: Q/D move, Z jump, F attack, S block, G special (ice)\n"
            "Player 2: arrows move/jump, N attack, Down block, M special (fireball)\n"
            "ENTER start / next round, R reset match, ESC pause (menu after a round),\n"
            "BACKSPACE menu while paused, F1 hitboxes"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--fps", type=int, default=FPS, help="target frame rate")
    return parser.parse_args(argv)


def main(argv=None):
    """Entry point utama"""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(f"\n{'='*60}")
    print(f"  {GAME_TITLE}")
    print(f"{'='*60}\n")
    print("Memuat game...")

    from .core.game import Game
    from .graphics.renderer import Renderer

    game = Game(fps=args.fps)
    game.set_renderer(Renderer())

    print("\nGame siap! Tekan ENTER untuk mulai...")
    print("ESC = Pause / Keluar | ENTER = Mulai | R = Reset | BACKSPACE = Menu\n")

    try:
        game.run()
    except KeyboardInterrupt:
        print("\nGame dihentikan oleh user.")


if __name__ == "__main__":
    main()
