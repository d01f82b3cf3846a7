#!/usr/bin/env python3
"""Box plots for the plan9 plot(1) command.

Reads data sets of the form <name> <number>* from standard input and writes
a series of box plots for plot(1) on standard output.

Example:
    echo "linear 1 2 3 4 5 6 exponential 2 4 8 16 32 64" | box -t Title | plot
"""

import argparse
import sys

from boxplot.draw import draw
from boxplot.reader import read_boxes


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate side-by-side box plots for plot(1) from "
                    "'<name> <number>*' data sets read on standard input."
    )
    parser.add_argument(
        "-t", "--title",
        help="Plot title.",
        default=""
    )
    args = parser.parse_args(argv)

    # Read everything first, the scale depends on all data sets.
    try:
        boxes = read_boxes(sys.stdin)
    except OSError as e:
        print("Read failed: ", e)
        sys.exit(1)

    draw(boxes, args.title, sys.stdout)


if __name__ == "__main__":
    main()
