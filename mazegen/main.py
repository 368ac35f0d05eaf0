import argparse
import logging

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mazegen", description="Perfect maze generator (randomized depth-first backtracker)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--width", type=positive_int, default=20, help="Maze Width")
    gen_parser.add_argument("--height", type=positive_int, default=20, help="Maze Height")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--out", type=str, help="Output file path (optional)")
    gen_parser.add_argument("--compress", action="store_true", help="Compress the saved wall data")
    gen_parser.add_argument("--seed-only", action="store_true", help="Save only size and seed (requires --seed)")
    gen_parser.add_argument("--record-events", type=str, help="Save generation events to binary file")
    gen_parser.add_argument("--visual", action="store_true", help="Animate generation in a window")
    gen_parser.add_argument("--quiet", "-q", action="store_true", help="Do not print the text diagram")

    # Show Command
    show_parser = subparsers.add_parser("show", help="Display a saved maze")
    show_parser.add_argument("input_file", help="Path to maze file")
    show_parser.add_argument("--visual", action="store_true", help="Show in a window instead of printing")

    # Replay Command
    replay_parser = subparsers.add_parser("replay", help="Replay an event log")
    replay_parser.add_argument("event_file", help="Path to event log file")
    replay_parser.add_argument("--visual", action="store_true", help="Animate the replay in a window")

    # Stats Command
    stats_parser = subparsers.add_parser("stats", help="Print statistics of a saved maze")
    stats_parser.add_argument("input_file", help="Path to maze file")

    return parser

def open_window(grid, generator=None):
    from mazegen.viz.renderer import Renderer
    renderer = Renderer(grid, generator=generator)
    renderer.init_window()
    renderer.run_loop()
    return renderer

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("mazegen")

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")

    if args.command == "generate":
        if args.seed_only and args.seed is None:
            parser.error("--seed-only requires --seed")

        from mazegen.core.events import EventWriter, MAX_SIDE
        if args.record_events and max(args.width, args.height) > MAX_SIDE:
            parser.error(f"--record-events supports at most {MAX_SIDE} cells per side")

        logger.info(f"Generating {args.width}x{args.height} maze (seed={args.seed})...")

        from mazegen.core.grid import Maze, Size
        from mazegen.algo.dfs import RecursiveBacktracker

        evt_writer = None
        if args.record_events:
            evt_writer = EventWriter(args.record_events)
            logger.info(f"Recording events to {args.record_events}...")

        try:
            grid = Maze(Size(args.width, args.height), event_writer=evt_writer)

            if args.visual:
                generator = RecursiveBacktracker(grid, seed=args.seed, progress_interval=1)
                renderer = open_window(grid, generator)
                # Window may close mid-generation; carry on with the same pass
                renderer.finish()
            else:
                generator = RecursiveBacktracker(grid, seed=args.seed)
                generator.run_all()
        finally:
            if evt_writer:
                evt_writer.close()

        logger.info(f"Carved {generator.passages_carved} passages ({generator.backtracks} backtracks)")

        if args.out:
            from mazegen.io.serializer import MazeSerializer
            meta = {"algo": "dfs", "seed": args.seed}
            MazeSerializer.save(grid, args.out, meta=meta, seed_only=args.seed_only, compress=args.compress)

        if not args.quiet and not args.visual:
            print(grid.display())

    elif args.command == "show":
        from mazegen.io.serializer import MazeSerializer
        grid, meta = MazeSerializer.load(args.input_file)
        logger.info(f"Loaded {grid.width}x{grid.height} maze. Meta: {meta}")

        if args.visual:
            open_window(grid)
        else:
            print(grid.display())

    elif args.command == "replay":
        from mazegen.core.events import EventReader
        from mazegen.core.grid import Maze
        from mazegen.viz.replay import EventAdapter

        with EventReader(args.event_file) as reader:
            w, h = reader.read_header()
            logger.info(f"Replaying {args.event_file} ({w}x{h})...")

            grid = Maze((w, h))
            adapter = EventAdapter(grid, reader)
            if args.visual:
                open_window(grid, adapter)
            else:
                adapter.run_all()
                print(grid.display())

    elif args.command == "stats":
        from mazegen.io.serializer import MazeSerializer
        from mazegen.core.analysis import MazeAnalyzer
        grid, meta = MazeSerializer.load(args.input_file)

        stats = MazeAnalyzer.calculate_stats(grid)
        stats["perfect"] = MazeAnalyzer.is_perfect(grid)
        for key, value in stats.items():
            print(f"{key:<18} {value}")

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
