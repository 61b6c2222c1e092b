#!/usr/bin/env python
"""
Export a simulated longitudinal panel to CSV.

Uses the tutorial scenario unless overridden on the command line.

Usage:
    python scripts/export_panel.py [--output PATH] [--individuals N] [--seed S]
"""

import argparse
from pathlib import Path

from longsim import LongitudinalModel


def main():
    parser = argparse.ArgumentParser(
        description="Export a simulated longitudinal panel for plotting tutorials"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("longitudinal_panel.csv"),
        help="Output CSV file"
    )
    parser.add_argument(
        "--individuals",
        type=int,
        default=200,
        help="Number of simulated individuals (default: 200)"
    )
    parser.add_argument(
        "--max-obs",
        type=int,
        default=10,
        help="Largest time index (default: 10)"
    )
    parser.add_argument(
        "--autocorrelation",
        type=float,
        default=0.4,
        help="AR(1) coefficient of residuals (default: 0.4)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed (default: 42)"
    )
    parser.add_argument(
        "--with-trends",
        action="store_true",
        help="Also write per-individual trend lines next to the panel"
    )
    args = parser.parse_args()

    model = LongitudinalModel()
    model.set_seed(args.seed)
    model.set_max_observations(args.max_obs)
    model.set_autocorrelation(args.autocorrelation)

    data = model.generate(args.individuals)
    frame = data.to_frame()

    args.output.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(args.output, index=False)
    print(f"Wrote {len(frame)} observations for {data.n_individuals} individuals to {args.output}")

    if args.with_trends:
        from longsim.stats.trends import fit_individual_trends

        trends_path = args.output.with_name(args.output.stem + "_trends.csv")
        fit_individual_trends(data).to_csv(trends_path, index=False)
        print(f"Wrote trend lines to {trends_path}")


if __name__ == "__main__":
    main()
