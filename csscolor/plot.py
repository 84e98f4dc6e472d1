"""
Plotting resolved CSS colors on the chroma/hue plane of Oklch.
"""
import sys

try:
    import matplotlib.pyplot as plt
    from matplotlib.ticker import FuncFormatter
except ImportError:
    print("csscolor.plot requires matplotlib. Please install the package,")
    print("e.g., by executing `pip install matplotlib`, and then")
    print("run `python -m csscolor.plot` again.")
    sys.exit(1)

import argparse
import dataclasses
import logging
import math
import pathlib
from typing import Any

from . import Color, ColorError, Context, parse_color, to_hex, unpack
from .cli import configure_logging, ingest
from .conversion import get_converter


log = logging.getLogger("csscolor.plot")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m csscolor.plot",
        description="""
            Plot CSS colors on the chroma/hue plane of Oklch while ignoring
            their lightness, which is shown in a separate bar chart instead.
            Transparency is ignored, too. Colors are read from the command
            line and, if the -i/--input option is specified, from the named
            file with newline-separated colors.
        """,
    )
    parser.add_argument(
        "-q", "--quiet",
        action="count",
        default=0,
        help="log less; may be repeated",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="log more; may be repeated",
    )
    parser.add_argument(
        "-i", "--input",
        help="read newline-separated colors in CSS syntax from named file",
    )
    parser.add_argument(
        "--no-light",
        action="store_true",
        help="don't include bar chart for lightness",
    )
    parser.add_argument(
        "-o", "--output",
        help="write color plot to the named file",
    )
    parser.add_argument(
        "colors",
        nargs="*",
        help="the CSS colors to plot",
    )
    return parser


@dataclasses.dataclass(frozen=True, slots=True)
class PlotPoint:
    """A resolved color in Oklch, ready for plotting."""
    text: str
    hex_color: str
    lightness: float
    chroma: float
    hue: float

    def is_gray(self, threshold: float) -> bool:
        return self.chroma < threshold or math.isnan(self.hue)


class ColorPlotter:
    ACHROMATIC_THRESHOLD = 0.01

    def __init__(self) -> None:
        self.points: list[PlotPoint] = []
        self.duplicates = 0
        self._seen: set[Color] = set()
        self._to_oklch = get_converter('rgb256', 'oklch')

    def add(self, text: str, color: Color) -> None:
        """Add the color unless an opaque version has been added before."""
        r, g, b, _ = unpack(color)
        lightness, chroma, hue = self._to_oklch(r, g, b)
        point = PlotPoint(text, to_hex(color)[:7], lightness, chroma, hue)
        log.info(
            "%-24s %s  L=%.5f  C=%.5f  h=%.1f",
            text, point.hex_color, lightness, chroma, hue
        )

        opaque = color | 0xFF
        if opaque in self._seen:
            self.duplicates += 1
            return
        self._seen.add(opaque)
        self.points.append(point)

    @property
    def chromatic(self) -> list[PlotPoint]:
        return [p for p in self.points if not p.is_gray(self.ACHROMATIC_THRESHOLD)]

    @property
    def grays(self) -> list[PlotPoint]:
        return [p for p in self.points if p.is_gray(self.ACHROMATIC_THRESHOLD)]

    def effective_max_chroma(self) -> float:
        highest = max((p.chroma for p in self.chromatic), default=0.0)
        return max(0.1, math.ceil(highest * 10) / 10)

    def title(self) -> str:
        count = len(self.points)
        title = f"{count} color{'' if count == 1 else 's'} in Oklch"
        if self.duplicates:
            title += f" ({self.duplicates} duplicate{'' if self.duplicates == 1 else 's'})"
        return title

    def create_figure(self, with_lightness: bool = True) -> Any:
        if with_lightness:
            fig: Any = plt.figure(layout="constrained", figsize=(5, 6.5))  # type: ignore
            axes: Any = fig.add_subplot(6, 10, (1, 50), polar=True)
        else:
            fig = plt.figure(layout="constrained", figsize=(5, 5.5))  # type: ignore
            axes = fig.add_subplot(polar=True)

        for point in self.chromatic:
            axes.scatter(
                [point.hue * math.pi / 180], [point.chroma],
                c=[point.hex_color], s=[80], marker="o", edgecolors="#000", zorder=5,
            )

        # All grays show up as their average at the center
        grays = self.grays
        if grays:
            lightness = sum(p.lightness for p in grays) / len(grays)
            gray = to_hex(parse_color(f"oklab({lightness:.6f} 0 0)"))[:7]
            axes.scatter([0], [0], c=[gray], s=[80], marker="o", edgecolors="#000")

        axes.set_aspect(1)
        axes.set_rmin(0)
        axes.set_rmax(self.effective_max_chroma())
        axes.set_rlabel_position(0)
        axes.yaxis.set_major_formatter(FuncFormatter(
            lambda y, _: "" if y == 0 else f"{y:.2f}"
        ))
        plt.setp(axes.yaxis.get_majorticklabels(), ha="center")  # type: ignore
        axes.set_axisbelow(True)
        axes.set_title(self.title(), style="italic", size=12, x=0.5, y=1.1)

        if with_lightness:
            bars: Any = fig.add_subplot(6, 10, (51, 60))
            bars.bar(
                range(len(self.points)),
                [p.lightness for p in self.points],
                color=[p.hex_color for p in self.points],
                edgecolor="#000",
            )
            bars.set_ylim(0, 1)
            bars.set_xticks([])
            bars.set_ylabel("Lightness")

        return fig


def main(argv: None | list[str] = None) -> int:
    options = create_parser().parse_args(argv)
    configure_logging(options.verbose, options.quiet)

    texts = list(options.colors)
    if options.input is not None:
        texts.extend(ingest(options.input))
    if not texts:
        log.error("no colors to plot")
        return 1

    context = Context()
    plotter = ColorPlotter()
    status = 0
    for text in texts:
        try:
            plotter.add(text, parse_color(text, context))
        except ColorError as x:
            log.error("%s", x)
            status = 1

    if options.output is not None:
        file_name = options.output
    elif options.input is not None:
        file_name = str(pathlib.Path(options.input).with_suffix(".svg"))
    else:
        file_name = "colors.svg"

    fig = plotter.create_figure(with_lightness=not options.no_light)
    log.info("Saving plot to `%s`", file_name)
    fig.savefig(file_name, bbox_inches="tight")  # type: ignore
    return status


if __name__ == "__main__":
    sys.exit(main())
