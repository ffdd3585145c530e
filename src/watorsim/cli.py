"""
Command line entry point: run Wa-Tor live in the terminal.

    wator                      # fill the terminal, run until sharks die out
    wator --seed 7 --headless  # no drawing, print a summary at the end
    wator --plot run.png       # also save population plots
"""

from __future__ import annotations
import argparse
import logging
import sys
import time

from watorsim.analysis import PopulationHistory, summarize_population
from watorsim.core import Simulation, WatorConfig
from watorsim.core.config import (
    FISH_BREED_INTERVAL,
    FISH_PROBABILITY,
    MS_BETWEEN_CHRONON,
    SHARK_BREED_INTERVAL,
    SHARK_PROBABILITY,
    SHARK_STARVE_INTERVAL,
)
from watorsim.rendering import TerminalScreen, render_frame, terminal_world_size

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="wator", description="Wa-Tor predator-prey simulation")
    p.add_argument("--width", type=int, default=None, help="Grid width (default: fit terminal)")
    p.add_argument("--height", type=int, default=None, help="Grid height (default: fit terminal)")
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    p.add_argument(
        "--delay-ms", type=int, default=MS_BETWEEN_CHRONON,
        help="Pause between chronons in milliseconds",
    )
    p.add_argument("--no-wrap", action="store_true", help="Bounded world instead of a torus")
    p.add_argument("--max-chronons", type=int, default=None, help="Stop after this many chronons")
    p.add_argument("--fish-breed", type=int, default=FISH_BREED_INTERVAL, help="Fish breed interval")
    p.add_argument("--shark-breed", type=int, default=SHARK_BREED_INTERVAL, help="Shark breed interval")
    p.add_argument("--shark-starve", type=int, default=SHARK_STARVE_INTERVAL, help="Shark starve interval")
    p.add_argument(
        "--shark-probability", type=float, default=SHARK_PROBABILITY,
        help="Chance a cell starts as a shark",
    )
    p.add_argument(
        "--fish-probability", type=float, default=FISH_PROBABILITY,
        help="Chance a cell starts as a fish",
    )
    p.add_argument("--headless", action="store_true", help="Do not draw the world")
    p.add_argument("--plot", default=None, metavar="PATH", help="Save population plots to PATH")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def config_from_args(args: argparse.Namespace) -> WatorConfig:
    width, height = args.width, args.height
    if width is None or height is None:
        term_w, term_h = terminal_world_size()
        width = term_w if width is None else width
        height = term_h if height is None else height

    return WatorConfig(
        width=width,
        height=height,
        fish_breed_interval=args.fish_breed,
        shark_breed_interval=args.shark_breed,
        shark_starve_interval=args.shark_starve,
        wrap=not args.no_wrap,
        shark_probability=args.shark_probability,
        fish_probability=args.fish_probability,
        seed=args.seed,
        delay_ms=args.delay_ms,
    )


def run_live(sim: Simulation, max_chronons: int | None) -> None:
    """Draw a frame per chronon, pausing delay_ms between chronons."""
    config = sim.config
    delay = config.delay_ms / 1000.0

    def draw(s: Simulation, fish: int, sharks: int) -> None:
        line = s.stats.format_line(fish, sharks, config.width, config.height)
        screen.draw(render_frame(s.world, config.width, line, config.old_shark_age))
        if not s.state.is_terminated and delay > 0:
            time.sleep(delay)

    with TerminalScreen() as screen:
        sim.run(max_chronons=max_chronons, on_chronon=draw)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    history = PopulationHistory()
    try:
        sim = Simulation(config=config_from_args(args), history=history)
    except ValueError as e:
        print(f"wator: {e}", file=sys.stderr)
        return 2

    if args.headless:
        sim.run(max_chronons=args.max_chronons)
    else:
        run_live(sim, args.max_chronons)

    fish, sharks, _ = sim.population()
    if sim.state.is_terminated:
        print("All sharks died!")
    else:
        print(sim.stats.format_line(fish, sharks, sim.config.width, sim.config.height))

    if len(history) > 0:
        summary = summarize_population(history)
        print(
            f"Ran {summary.n_chronons} chronons: "
            f"fish {summary.min_fish}-{summary.max_fish}, "
            f"sharks {summary.min_sharks}-{summary.max_sharks}, "
            f"shark lag {summary.shark_lag}"
        )

        if args.plot:
            from watorsim.viz import plot_run_summary, save_figure

            fig = plot_run_summary(sim.world, sim.config.width, history)
            save_figure(fig, args.plot)
            logger.info("Saved plots to %s", args.plot)

    return 0


if __name__ == "__main__":
    sys.exit(main())
