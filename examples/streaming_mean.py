"""Bootstrap a running mean over a stream.

The data is never stored: each value updates the mean and 1000 bootstrap
replicates, and the interval can be read off at any point.

Usage:
    python examples/streaming_mean.py
"""

import numpy as np

from onlinestats import BernoulliBootstrap, Mean, print_state


def main():
    rng = np.random.default_rng(0)
    boot = BernoulliBootstrap(Mean(), n_replicates=1000, seed=0)

    for step in range(5):
        boot.ingest_batch(rng.exponential(scale=2.0, size=2000))
        lower, upper = boot.confidence_interval(0.95)
        print(
            f"after {boot.nobs():6d} values: mean={boot.mean():.4f} "
            f"95% CI=[{lower:.4f}, {upper:.4f}] se={boot.std():.4f}"
        )

    print_state(boot)


if __name__ == "__main__":
    main()
