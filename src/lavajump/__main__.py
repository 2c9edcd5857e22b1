from __future__ import annotations

import argparse
import logging
import random
import sys

from lavajump.domain.exceptions import InvalidLevelPlan
from lavajump.domain.levels import LEVELS

logger = logging.getLogger("lavajump")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="lavajump", description="Collect the coins, avoid the lava.")
    p.add_argument("--level", choices=sorted(LEVELS), default="simple")
    p.add_argument("--scale", type=int, default=20, help="pixels per grid cell")
    p.add_argument("--width", type=int, default=600)
    p.add_argument("--height", type=int, default=450)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--seed", type=int, default=None, help="seed for coin phases")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Imported late: tkinter is only needed once we actually open a window.
    from lavajump.app.game_app import GameApp

    try:
        app = GameApp(
            LEVELS[args.level],
            scale=args.scale,
            width=args.width,
            height=args.height,
            fps=args.fps,
            rng=random.Random(args.seed),
        )
    except InvalidLevelPlan as e:
        logger.error("cannot start level %r: %s", args.level, e)
        return 2

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
