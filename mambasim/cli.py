"""Command that runs one simulated game and writes its statistics as JSON."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import load
from .game import Game, GameConfig
from .generator import generate

DEFAULT_CONFIG = "../_fixture/sample_config.json"
DEFAULT_OUTPUT = "../_fixture/sample_output.json"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mambasim", description="Simulate a game and record its statistics.")
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="model configuration JSON file")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="where to write the statistics sheet")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the simulation; return 0 on success and 1 on failure."""
    args = _parser().parse_args(argv)
    try:
        model = load(args.config)
        players = generate(model.generator_config())
    except (OSError, ValueError) as exc:
        print(f"mambasim: {exc}", file=sys.stderr)
        return 1

    game = Game(players, GameConfig(fallback_shot_percentage=model.fallback_shot_percentage))
    game.play()
    payload = json.dumps([record.to_dict() for record in game.stats_sheet], separators=(",", ":"))

    try:
        Path(args.output).write_text(payload, encoding="utf-8")
    except OSError as exc:
        print(f"mambasim: failed to write file: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())