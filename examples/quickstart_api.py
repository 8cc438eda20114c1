#!/usr/bin/env python3
"""Quickstart example using the high-level decompose/reconstruct API.

This example demonstrates the simplest way to use the package:
- Generate a noisy test signal (or read one sample per line from a file)
- Decompose it with decompose()
- Print per-level detail energy
- Reconstruct it with reconstruct() and report the round-trip error
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np

from dwtbank.api import decompose, reconstruct


def _load_signal(path: Path | None, length: int) -> np.ndarray:
    if path is not None and path.exists():
        return np.loadtxt(path, dtype=np.float64, ndmin=1)
    t = np.linspace(0.0, 1.0, length)
    rng = np.random.default_rng(0)
    return np.sin(2 * np.pi * 5 * t) + 0.2 * rng.standard_normal(length)


def main() -> None:
    parser = argparse.ArgumentParser(description="Quickstart API example")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Text file with one sample per line (random signal if omitted)",
    )
    parser.add_argument(
        "--length",
        type=int,
        default=1000,
        help="Length of the generated signal",
    )
    parser.add_argument(
        "--wavelet",
        default="db4",
        help="Discrete wavelet name (default: db4)",
    )
    parser.add_argument(
        "--strategy",
        default="default",
        help="Transform strategy (default, periodic, zero, symmetric, reflect, constant)",
    )
    parser.add_argument(
        "--level",
        type=int,
        default=None,
        help="Decomposition level (full decomposition if omitted)",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level)

    signal = _load_signal(args.input, args.length)
    print(f"Signal: {signal.size} samples")

    result = decompose(signal, wavelet=args.wavelet, level=args.level, strategy=args.strategy)
    print(f"Decomposed to level {result.level} ({result.wavelet}, {result.strategy})")
    print(f"Approximation: {result.approximation.size} coefficients")
    for i, details in enumerate(result.details, start=1):
        print(f"  level {i}: {details.size:5d} details, energy {np.sum(details ** 2):.4f}")

    recon = reconstruct(result)
    error = np.max(np.abs(recon - signal))
    print(f"Max reconstruction error: {error:.3e}")


if __name__ == "__main__":
    main()
