#!/usr/bin/env python
"""
ROC Area Between Two Samples

Computes the area under the ROC curve separating two samples read from text
files (one number per line or whitespace/comma separated), optionally with a
bootstrap significance test.

Usage:
    python run_rocarea.py x.txt y.txt                          # D only
    python run_rocarea.py x.txt y.txt --bootstrap 2000 --seed 1
    python run_rocarea.py x.txt y.txt --transform swap --display
    python run_rocarea.py --help                               # Show all options
"""

import argparse
import json
import math
from pathlib import Path

import numpy as np

from rocarea import compute_roc
from rocarea.methods.significance import TRANSFORMS


def load_sample(path: Path) -> np.ndarray:
    """Read a sample of numbers from a text file."""
    text = path.read_text().replace(",", " ")
    return np.array(text.split(), dtype=np.float64)


def _json_float(value: float | None) -> float | None:
    if value is None or math.isnan(value):
        return None
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Area under the ROC curve separating two samples",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("x", type=Path, help="File with the first sample")
    parser.add_argument("y", type=Path, help="File with the second sample")
    parser.add_argument(
        "--bootstrap", type=int, default=0, help="Number of bootstrap resamples (0 disables)"
    )
    parser.add_argument(
        "--transform", choices=TRANSFORMS, default="none", help="Rescaling of the ROC area"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for resampling")
    parser.add_argument("--display", action="store_true", help="Plot the ROC curve")
    parser.add_argument("--output", type=Path, default=None, help="Write the summary as JSON")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> dict:
    args = parse_args(argv)

    x = load_sample(args.x)
    y = load_sample(args.y)

    result = compute_roc(
        x,
        y,
        bootstrap=args.bootstrap,
        transform=args.transform,
        display=args.display,
        rng=args.seed,
    )

    summary = {
        "n_x": len(x),
        "n_y": len(y),
        "transform": args.transform,
        "bootstrap": args.bootstrap,
        "D": _json_float(result.d),
        "P": _json_float(result.p_value),
        "SEM": _json_float(result.sem),
    }

    print(f"D = {result.d:.4f}")
    if result.p_value is not None:
        print(f"P = {result.p_value:.4f}  (n_bootstrap={args.bootstrap})")
        print(f"SEM = {result.sem:.4f}")

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w") as f:
            json.dump(summary, f, indent=2)
        print(f"Summary written to {args.output}")

    if args.display:
        import matplotlib.pyplot as plt

        plt.show()

    return summary


if __name__ == "__main__":
    main()
