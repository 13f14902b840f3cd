import os, argparse, numpy as np, matplotlib.pyplot as plt
from range_constraints import Constraints
from range_io import read_queries, write_result
from range_update import array_manipulation, cumulative_profile, find_peak, naive_max

def plot_profile(n, queries, outpath):
    prof = cumulative_profile(queries, n)
    best, s, e = find_peak(queries, n)
    xs = np.arange(1, n + 1)
    plt.figure()
    plt.step(xs, prof, where="mid")
    plt.plot(xs[s-1:e], prof[s-1:e], linewidth=3)
    plt.title(f"max={best} at [{s},{e}]")
    plt.xlabel("cell"); plt.ylabel("value")
    plt.savefig(outpath); plt.close()

def _ensure_parent(path):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

def run(argv=None):
    ap = argparse.ArgumentParser(prog="array-manipulation",
                                 description="Maximum cell value after range additions.")
    ap.add_argument("--input", required=True, help="file with 'n m' then m lines 'a b k'")
    ap.add_argument("--output", default="result.txt")
    ap.add_argument("--strict", action="store_true", help="enforce the exercise's input bounds")
    ap.add_argument("--check", action="store_true", help="cross-check against the O(n*q) simulation")
    ap.add_argument("--plot", default=None, help="save a plot of the final cell values here")
    args = ap.parse_args(argv)

    try:
        n, queries = read_queries(args.input)
    except OSError as e:
        ap.error(f"cannot read {args.input}: {e.strerror}")
    except ValueError as e:
        ap.error(f"{args.input}: {e}")
    print(f"Loaded queries: {len(queries)} (n={n})")

    try:
        best = array_manipulation(n, queries, constraints=Constraints() if args.strict else None)
    except ValueError as e:
        ap.error(str(e))
    print(f"Max value: {best}")

    if args.check:
        ref = naive_max(queries, n)
        if ref != best:
            raise SystemExit(f"mismatch: difference array gave {best}, simulation gave {ref}")
        print("Check: ok")

    try:
        if args.plot:
            _ensure_parent(args.plot)
            plot_profile(n, queries, args.plot)
        _ensure_parent(args.output)
        write_result(args.output, best)
    except OSError as e:
        ap.error(f"cannot write {e.filename or args.output}: {e.strerror}")
    print("Done.")
    return best

def main(argv=None):
    # console-script entry: the wrapper exits with whatever this returns
    run(argv)

if __name__ == "__main__":
    main()
