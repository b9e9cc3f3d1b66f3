"""
Microbenchmark: time per update vs number of agents.
Run:
  python benchmarks/bench_update.py
"""
import time
import numpy as np
from swarmalator_sim.engine import Swarmalator
from swarmalator_sim.config import random_positions, linspace_phases, split_values
from swarmalator_sim.profiler import Profiler


def run(n: int, steps: int = 100):
    prof = Profiler()
    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)
    engine = Swarmalator(
        n,
        random_positions(n, 3.0, rng),
        linspace_phases(n),
        split_values(n, 1.0, -1.0),
        K=1.0,
        J=0.5,
        chirality=split_values(n, 1.0, -1.0),
        target=(2.0, 0.0),
        profiler=prof,
    )

    # warmup
    for _ in range(5):
        engine.update(0.05)

    t0 = time.perf_counter()
    for _ in range(steps):
        engine.update(0.05)
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.summary()


if __name__ == "__main__":
    for n in [10, 50, 100, 200, 500]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["coupling", "pairwise", "integrate"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
