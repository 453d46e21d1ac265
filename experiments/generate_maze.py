# %%
import os
import sys
import argparse

from mazegen.config import MazeConfig
from mazegen.utils import Logger, setup_maze
from mazegen.utils.validation import is_spanning_tree


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate a perfect maze by randomized depth-first search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 20x10 maze from the example config
  python generate_maze.py -c conf/maze.yaml

  # Override the size and seed, watch it being carved
  python generate_maze.py --width 8 --height 4 --seed 7 --debug
        """,
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        type=str,
        default=None,
        help="Path to the maze configuration YAML file",
    )
    parser.add_argument("--width", type=int, default=None, help="Cells per row")
    parser.add_argument("--height", type=int, default=None, help="Cells per column")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--builder",
        choices=["recursive", "iterative"],
        default=None,
        help="Depth-first search variant (default: iterative)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Print the maze after every visited cell"
    )
    parser.add_argument("--log-path", type=str, default=None, help="JSON file for metrics")
    parser.add_argument("--plot-path", type=str, default=None, help="Save a figure of the maze")
    parser.add_argument(
        "--check", action="store_true", help="Verify that the passages form a spanning tree"
    )
    return parser


def load_config(args) -> MazeConfig:
    if args.config_path is None:
        config = MazeConfig()
    else:
        if not os.path.exists(args.config_path):
            raise FileNotFoundError(f"Config file not found: {args.config_path}")
        try:
            config = MazeConfig.from_yaml(args.config_path)
        except Exception as e:
            raise ValueError(f"Failed to load config from {args.config_path}: {e}")

    if args.width is not None:
        config.grid.width = args.width
    if args.height is not None:
        config.grid.height = args.height
    if args.seed is not None:
        config.seed = args.seed
    if args.builder is not None:
        config.builder.builder_type = args.builder
    if args.debug:
        config.builder.debug = True
    if args.log_path is not None:
        config.logging.log_path = args.log_path
    if args.plot_path is not None:
        config.logging.plot_path = args.plot_path
    return config


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = load_config(args)
    verbose = config.logging.verbose

    if verbose:
        print("=" * 60)
        print("GENERATE MAZE")
        print("=" * 60)
        print(f"  Size: {config.grid.width} x {config.grid.height}")
        print(f"  Seed: {config.seed}")
        print(f"  Builder: {config.builder.builder_type}")
        print("=" * 60)

    logger = Logger()
    maze = setup_maze(config, logger=logger)
    maze.display()

    if config.logging.log_path is not None:
        logger.save(config.logging.log_path)
        if verbose:
            print(f"Metrics saved to {config.logging.log_path}")

    if config.logging.plot_path is not None:
        from mazegen.utils.visualize import plot_maze

        plot_maze(maze.canvas, fig_path=config.logging.plot_path)
        if verbose:
            print(f"Figure saved to {config.logging.plot_path}")

    if args.check:
        ok = is_spanning_tree(maze.passages(), maze.width, maze.height)
        print(f"Spanning tree: {'yes' if ok else 'NO'}")
        if not ok:
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
