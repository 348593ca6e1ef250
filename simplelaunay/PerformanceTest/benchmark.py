import time

import pandas as pd
from scipy.spatial import Delaunay

from simplelaunay.BowyerWatson import triangulate
from simplelaunay.RandomPoints import random_points_in_box


def benchmark_triangulate(ns, seed=42, csv_filename="benchmark_results.csv"):
    """
    Time triangulate() against scipy.spatial.Delaunay for every n in ns.
    Returns the results DataFrame; also written to csv_filename unless it is None.
    """
    results = []

    for n in ns:
        points = random_points_in_box(n, seed=seed)

        start = time.perf_counter()
        flat = triangulate(points)
        elapsed = time.perf_counter() - start

        start = time.perf_counter()
        reference = Delaunay(points)
        elapsed_scipy = time.perf_counter() - start

        count = len(flat) // 3
        print(f"n={n}: {elapsed:.6f} seconds ({count} triangles), scipy {elapsed_scipy:.6f} seconds "
              f"({len(reference.simplices)} triangles)")
        results.append({"n": n,
                        "time_s": elapsed,
                        "triangles": count,
                        "scipy_time_s": elapsed_scipy,
                        "scipy_triangles": len(reference.simplices)})

    df = pd.DataFrame(results)
    if csv_filename is not None:
        df.to_csv(csv_filename, index=False)
        print(f"Benchmark results saved to {csv_filename}")
    return df


if __name__ == "__main__":
    ns = [10, 50, 100, 250, 500, 1000, 1500, 2000]
    benchmark_triangulate(ns)
