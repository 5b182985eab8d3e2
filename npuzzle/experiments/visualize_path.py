#!/usr/bin/env python3
import argparse, os, random
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from npuzzle.domains.board import Board, replay
from npuzzle.search.ida_star import solve, UnsolvedError


def draw_board(board: Board, out_path: Path, title: str = ""):
    n = board.size
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n+1):
        ax.plot([0,n],[i,i], linewidth=1)
        ax.plot([i,i],[0,n], linewidth=1)
    # tiles
    for r, row in enumerate(board.tiles):
        for c, t in enumerate(row):
            if t == 0: continue
            ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title, fontsize=10)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()


def main():
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--n", type=int, default=3)
    p.add_argument("--depth", type=int, default=10, help="Random-walk scramble depth")
    p.add_argument("--shuffle", action="store_true", help="Uniform solvable shuffle instead of a scramble")
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="report/figs/example_path")
    args = p.parse_args()

    if args.shuffle:
        start = Board.new(args.n)
        start.shuffle(random.Random(args.seed))
    else:
        start = Board.scramble(args.n, args.depth, args.seed)

    try:
        moves = solve(start).unwrap()
    except UnsolvedError as e:
        print(f"No path ({e.failure.value}).")
        return

    outdir = Path(args.outdir)
    states = replay(start, moves)
    labels = ["start"] + [str(m) for m in moves]
    for i, (s, label) in enumerate(zip(states, labels)):
        draw_board(s, outdir / f"step_{i:03d}.png", title=label)
    print(f"Saved {len(states)} frames to {outdir}")

if __name__ == "__main__":
    main()
