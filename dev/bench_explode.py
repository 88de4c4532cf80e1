"""Benchmark expand() and count() on growing expressions."""
import time

import numpy as np

from explode import count, expand

CASES = [
    ("same level", "a{b}{c,d}{e,f,g}{h,i,j,k}{l,m,n,o,p}{q,r,s,t,v,w}"),
    ("nested", "s{{a,o}{il,lv},l{ee,o}p}ing" * 3),
    ("binary x12", "{0,1}" * 12),
    ("deep", "{" * 2000 + "x,y" + "}" * 2000),
]

RUNS = 20


def bench(fn, expr: str, runs: int = RUNS) -> np.ndarray:
    fn(expr)  # warm up
    times = np.empty(runs, dtype=np.float64)
    for r in range(runs):
        t0 = time.perf_counter()
        fn(expr)
        times[r] = time.perf_counter() - t0
    return times * 1000.0


print(f"{'case':<12} {'rows':>8} {'expand p50':>12} {'p90':>9} {'count p50':>11}")
for name, expr in CASES:
    te = bench(expand, expr)
    tc = bench(count, expr)
    rows = count(expr)
    print(
        f"{name:<12} {rows:>8,} {np.median(te):>10.3f}ms {np.percentile(te, 90):>7.3f}ms "
        f"{np.median(tc):>9.3f}ms"
    )
