import argparse
import logging
import os

from pong.config import BACKGROUND_STYLES, PongConfig


def build_parser():
    defaults = PongConfig()
    parser = argparse.ArgumentParser(description="Two-player Pong with animated backgrounds.")
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument("--winning-score", type=int, default=defaults.winning_score)
    parser.add_argument("--fps", type=int, default=defaults.fps)
    parser.add_argument("--background", choices=BACKGROUND_STYLES, default=defaults.background)
    parser.add_argument("--palette", default=None, help="color scheme name (random if omitted)")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--no-rumble", dest="rumble", action="store_false", default=True)
    parser.add_argument("--log-level", default=os.getenv("PONG_LOG_LEVEL", "INFO"))
    return parser


def config_from_args(args) -> PongConfig:
    config = PongConfig(
        width=args.width,
        height=args.height,
        winning_score=args.winning_score,
        fps=args.fps,
        background=args.background,
        palette=args.palette,
        seed=args.seed,
        rumble=args.rumble,
    )
    try:
        return config.validate()
    except ValueError as exc:
        raise SystemExit(f"Invalid configuration: {exc}")


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[%(name)s] %(message)s")
    config = config_from_args(args)

    # pygame is imported late so --help works without a display
    from game_context import GameContext
    from pong.game import PongScene, TITLE
    from scene_manager import SceneManager

    context = GameContext(config)
    manager = SceneManager(
        PongScene,
        size=(config.width, config.height),
        fps=config.fps,
        caption=TITLE,
        context=context,
    )
    manager.run()
    logging.getLogger("boot").info("Session: %r", context)


if __name__ == "__main__":
    main()
