from __future__ import annotations
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from . import __version__
from . import boundary
from .caller import RollCall
from .profiles import default_home, list_profiles, profile_dir
from .rng import seeded_factory
from .settings import Settings, load_settings, save_settings, settings_path


def positive_int(raw: str) -> int:
    try:
        v = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {raw!r}")
    if v < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {v}")
    return v


def interactive_loop(caller: RollCall, profile: str, home: Path, settings: Settings) -> None:
    print("Enter how many names to draw, 'c' to clear history, 'r' to reload, 'q' to quit.")
    while True:
        try:
            raw = input(f"Draw [{settings.default_count}]: ").strip().lower()
        except EOFError:
            print()
            return
        if raw in ("q", "quit", "exit"):
            return
        if raw == "c":
            boundary.clear_history(caller)
            print("History cleared.")
            continue
        if raw == "r":
            if boundary.import_source(profile, caller, home) == 0:
                print(f"Reloaded {len(caller.names())} names.")
            continue
        if not raw:
            n = settings.default_count
        else:
            try:
                n = int(raw)
            except ValueError:
                print("Enter a number, 'c', 'r' or 'q'.")
                continue
        print(boundary.draw(n, caller, settings.separator))


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(prog="rollcall", description="Call on random students without repeats.")
    ap.add_argument("--home", type=str, default=None, help="Data directory holding Profile/ and settings.json.")
    ap.add_argument("--profile", type=str, default=None, help="Profile name (Profile/<name>.csv) or a path to a .csv file.")
    ap.add_argument("-n", "--count", type=positive_int, default=None, help="How many names to draw each time.")
    ap.add_argument("--times", type=int, default=1, help="How many draws to make before exiting.")
    ap.add_argument("--seed", type=int, default=0, help="Debug seed for reproducible draws (0 = fresh entropy).")
    ap.add_argument("--list-profiles", action="store_true")
    ap.add_argument("-i", "--interactive", action="store_true")
    ap.add_argument("--save-defaults", action="store_true", help="Remember --profile and --count in settings.json.")
    ap.add_argument("--debug", action="store_true")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    home = Path(args.home) if args.home else default_home()
    settings = load_settings(settings_path(home))

    if args.list_profiles:
        profiles = list_profiles(home)
        if not profiles:
            print(f"No profiles found in {profile_dir(home)}")
        for name in profiles:
            print(name)
        return

    profile = args.profile or settings.default_profile
    if args.count is not None:
        settings.default_count = args.count

    if args.save_defaults:
        settings.default_profile = profile
        save_settings(settings_path(home), settings)
        print(f"Saved defaults to {settings_path(home)}")

    factory = None
    if args.seed:
        factory = seeded_factory(args.seed)
        print(f"(Using debug seed: {args.seed})")
    caller = RollCall(factory)

    if boundary.import_source(profile, caller, home) != 0:
        raise SystemExit(1)
    print(f"Loaded {len(caller.names())} names from '{profile}'.")

    if args.interactive:
        interactive_loop(caller, profile, home, settings)
        return

    for _ in range(max(1, args.times)):
        print(boundary.draw(settings.default_count, caller, settings.separator))


if __name__ == "__main__":
    main()
