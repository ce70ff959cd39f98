import argparse
import logging
import random

from .app import run


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="nokia-snake",
        description="Nokia-style snake. SPACE starts or pauses, arrows steer, R restarts after game over.",
    )
    parser.add_argument("--mute", action="store_true", help="Disable sound effects")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    rng = random.Random(args.seed) if args.seed is not None else None
    run(mute=args.mute, rng=rng)


if __name__ == "__main__":
    main()
