#!/usr/bin/env python3
import argparse, os
from pathlib import Path
import pandas as pd

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

KEYS = ["algorithm", "heuristic", "n", "depth"]
METRICS = ["time_sec", "expanded", "generated", "g"]


def load(paths) -> pd.DataFrame:
    dfs = []
    for p in paths:
        df = pd.read_csv(p)
        df["__src__"] = os.path.basename(p)
        dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)
    for c in METRICS + ["depth", "n", "seed", "solvable"]:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    df["heuristic"] = df["heuristic"].fillna("")
    df["termination"] = df["termination"].fillna("ok")
    return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean/std of each metric per (algorithm, heuristic, n, depth), solved rows only."""
    ok = df[df["termination"] == "ok"]
    if ok.empty:
        return pd.DataFrame()
    out = ok.groupby(KEYS)[METRICS].agg(["mean", "std", "count"])
    out.columns = [f"{m}_{s}" for m, s in out.columns]
    return out.reset_index()


def terminations(df: pd.DataFrame) -> pd.DataFrame:
    return df.groupby(["algorithm", "solvable", "termination"]).size().rename("count").reset_index()


def plot_expanded(summary: pd.DataFrame, out: Path):
    fig, ax = plt.subplots(figsize=(8, 6))
    for (algo, heur, n), grp in summary.groupby(["algorithm", "heuristic", "n"]):
        grp = grp.sort_values("depth")
        ax.errorbar(grp["depth"], grp["expanded_mean"], yerr=grp["expanded_std"].fillna(0.0),
                    marker="o", capsize=3, label=f"{algo} | {heur or '—'} | n={n}")
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel("expanded")
    ax.set_yscale("log")
    ax.grid(True)
    ax.legend()
    out.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved: {out}")


def main():
    ap = argparse.ArgumentParser(description="Summarize runner CSVs.")
    ap.add_argument("csv", nargs="+", help="CSV files from runner.py")
    ap.add_argument("--out", type=Path, default=None, help="Write the summary table as CSV")
    ap.add_argument("--plot", type=Path, default=None, help="Save expanded-vs-depth PNG")
    args = ap.parse_args()

    df = load(args.csv)
    if df.empty:
        print("No rows. Are your CSVs empty?")
        return

    summary = summarize(df)
    with pd.option_context("display.max_rows", None, "display.width", 160):
        print(summary.to_string(index=False))
        print()
        print(terminations(df).to_string(index=False))

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(args.out, index=False)
        print(f"Wrote {args.out}")
    if args.plot is not None and not summary.empty:
        plot_expanded(summary[summary["depth"] >= 0], args.plot)


if __name__ == "__main__":
    main()
