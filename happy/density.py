"""
    A simulation study of how common happy numbers are: exact counts for the small numbers and
    random sampling for the really big ones (up to ~10^18, the limit of int64).
"""
# If you have missing libraries, run the following on the command line: pip install numpy matplotlib
import matplotlib.pyplot as plt
import numpy as np

from happy.happy_map import happy_set


def happy_density(nmax):
    """ @return: the fraction of the numbers 1..nmax that are happy """
    if (nmax < 1):
        raise ValueError("expected nmax >= 1, got %d"%nmax)
    happy, _ = happy_set(np.arange(1, nmax+1))
    return np.count_nonzero(happy)/nmax


def cumulative_density(nmax):
    """ @return: d with d[k-1] the fraction of the numbers 1..k that are happy, for k = 1..nmax """
    if (nmax < 1):
        raise ValueError("expected nmax >= 1, got %d"%nmax)
    nn = np.arange(1, nmax+1)
    happy, _ = happy_set(nn)
    return np.cumsum(happy)/nn


def randomselect(low, high, number, rng=None):
    """ @return: 'number' random integers from low (inclusive) up to high (exclusive) """
    rng = np.random.default_rng() if (rng is None) else rng
    return rng.integers(low, high, int(number), dtype=np.int64)


def estimate_density(low, high, samples=10000, rng=None):
    """ Estimates the fraction of happy numbers in [low, high) from a random sample.
        @return: (fraction, standard error) """
    if (samples < 1):
        raise ValueError("expected samples >= 1, got %d"%samples)
    happy, _ = happy_set(randomselect(low, high, samples, rng))
    p = np.count_nonzero(happy)/len(happy)
    return p, np.sqrt(p*(1-p)/len(happy))


def study_density(decades=6, samples=10000, rng=None):
    """ Compares the exact density over 1..10^decades against random samples from every decade up to 10^18.
        After this you still need plt.show() to see the figure.
        @return: (figure, [(low, high, fraction, stderr), ...]) """
    rng = np.random.default_rng() if (rng is None) else rng

    # Exact result, only feasible for the small numbers
    nmax = 10**decades
    density = cumulative_density(nmax)
    print(f"Exact fraction of happy numbers up to {nmax}: {density[-1]*100:.2f} %")

    # Sampled results for each decade [10^k, 10^(k+1))
    estimates = []
    for k in range(1, 18):
        low, high = 10**k, 10**(k+1)
        p, stderr = estimate_density(low, high, samples, rng)
        estimates.append((low, high, p, stderr))
        print(f"Decade 10^{k} likelihood of a happy number: {p*100:.1f} +/- {stderr*100:.1f} %")

    fig = plt.figure()
    plt.semilogx(np.arange(1, nmax+1), density*100, label="Exact, cumulative")
    mid = [np.sqrt(low*high) for (low, high, p, stderr) in estimates] # Geometric centre of each decade
    plt.errorbar(mid, [p*100 for (low, high, p, stderr) in estimates], yerr=[stderr*100 for (low, high, p, stderr) in estimates],
                 fmt='o', label="Sampled, per decade")
    plt.xlabel("n"); plt.ylabel("Happy numbers [%]"); plt.legend()
    return fig, estimates



if __name__ == "__main__":
    study_density()
    plt.show()
