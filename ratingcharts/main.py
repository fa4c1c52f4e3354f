"""CLI entry point: render a rating chart from a JSON file to an image."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from ratingcharts.charts import (
    render_histogram,
    render_line_graph,
    render_rating,
    render_spider_graph,
    render_table,
)
from ratingcharts.config import (
    HistogramConfig,
    LineGraphConfig,
    RatingConfig,
    Size,
    SpiderGraphConfig,
    TableConfig,
    TableSize,
    Titles,
)
from ratingcharts.data.contracts import TableColumn

logger = logging.getLogger(__name__)

CHARTS = ("histogram", "line", "rating", "spider", "table")

DEFAULT_COLUMNS = [
    TableColumn("timestamp", "Timestamp"),
    TableColumn("value", "Value"),
    TableColumn("deviation", "Deviation"),
]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog="ratingcharts",
        description="Render rating charts from JSON input",
    )
    parser.add_argument("chart", choices=CHARTS, help="Chart to render")
    parser.add_argument("input", type=Path, help="JSON input file")
    parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help="Output image path; the suffix picks the format (e.g. .png, .svg)",
    )
    parser.add_argument(
        "--min-value",
        type=float,
        default=0.0,
        help="Lower bound of the value axis (default: 0)",
    )
    parser.add_argument(
        "--highlight",
        type=float,
        default=None,
        help="Value marked on the histogram (required for histogram)",
    )
    parser.add_argument("--title", default="", help="Chart title")
    parser.add_argument(
        "--width",
        type=float,
        default=None,
        help="Width in pixels (default: per chart)",
    )
    parser.add_argument(
        "--height",
        type=float,
        default=None,
        help="Height in pixels (default: per chart; ignored for rating)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def _size(args: argparse.Namespace, default: Size) -> Size:
    return Size(
        width=args.width if args.width is not None else default.width,
        height=args.height if args.height is not None else default.height,
    )


def _expect(data: Any, kind: type, chart: str) -> None:
    if not isinstance(data, kind):
        raise ValueError(
            f"{chart} input must be a JSON {kind.__name__}, got {type(data).__name__}."
        )


def build_figure(args: argparse.Namespace, data: Any) -> Figure:
    """Render the requested chart from decoded JSON.

    Args:
        args: Parsed CLI arguments.
        data: Decoded input file.

    Returns:
        The rendered figure.

    Raises:
        ValueError: If the input does not match the chart.
    """
    chart = args.chart
    titles = Titles(title=args.title)

    if chart == "histogram":
        _expect(data, list, chart)
        if args.highlight is None:
            raise ValueError("histogram needs --highlight.")
        config = HistogramConfig(
            size=_size(args, HistogramConfig().size), titles=titles,
        )
        return render_histogram(
            [float(v) for v in data], args.min_value, args.highlight, config,
        )

    if chart == "line":
        _expect(data, list, chart)
        config = LineGraphConfig(size=_size(args, LineGraphConfig().size), titles=titles)
        return render_line_graph(data, args.min_value, config)

    if chart == "rating":
        _expect(data, dict, chart)
        width = args.width if args.width is not None else RatingConfig().width
        return render_rating(data, RatingConfig(title=args.title, width=width))

    if chart == "spider":
        _expect(data, dict, chart)
        config = SpiderGraphConfig(
            size=_size(args, SpiderGraphConfig().size), title=args.title,
        )
        return render_spider_graph(
            {str(k): float(v) for k, v in data.items()}, args.min_value, config,
        )

    _expect(data, list, chart)
    default = TableSize()
    size = TableSize(
        max_height=args.height if args.height is not None else default.max_height,
        max_width=args.width if args.width is not None else default.max_width,
    )
    return render_table(data, DEFAULT_COLUMNS, TableConfig(size=size, title=args.title))


def run(args: argparse.Namespace) -> None:
    """Load the input, render the chart and write the image.

    Args:
        args: Parsed CLI arguments.
    """
    with open(args.input) as f:
        data = json.load(f)
    logger.debug("Loaded %s input from %s", args.chart, args.input)

    fig = build_figure(args, data)

    output: Path = args.output
    output.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output, dpi=fig.dpi)
    plt.close(fig)
    logger.info("%s chart written to %s", args.chart, output)


def main(argv: list[str] | None = None) -> None:
    """Main entry point.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).
    """
    args = _parse_args(argv)

    # Configure logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        run(args)
    except (OSError, ValueError, KeyError, TypeError) as exc:
        # json.JSONDecodeError is a ValueError
        logger.error("Cannot render %s from %s: %s", args.chart, args.input, exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
