#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("python -m npuzzle.experiments.runner --n 3 --depths 6 10 14 18 --per_depth 10 --algo both --include_unsolvable --out results/p8_linear_conflict.csv")
    run("python -m npuzzle.experiments.runner --n 3 --depths 6 10 14 18 --per_depth 10 --heuristic manhattan --out results/p8_manhattan.csv")
    run("python -m npuzzle.experiments.runner --n 4 --depths 10 20 30 --per_depth 5 --out results/p15_linear_conflict.csv")
    run("python -m npuzzle.experiments.analyze results/p8_linear_conflict.csv results/p8_manhattan.csv results/p15_linear_conflict.csv --out results/summary.csv --plot results/plots/expanded.png")

if __name__ == "__main__":
    main()
