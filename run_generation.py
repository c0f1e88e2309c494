#!/usr/bin/env python3
"""Entry point for sampling contextual SBM benchmark instances.

Loads a generation config, samples one CSBM instance (or one per sweep
point) and prints summary statistics. Nothing is written to disk: callers
that need the arrays use ``csbm.generation.generate_csbm`` directly.

Usage:
    python run_generation.py --config config.json
    python run_generation.py --config config.json --dry-run
    python run_generation.py --config config.json --sweep --verbose
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from dacite import DaciteError

from csbm.config import (
    ExperimentConfig,
    config_from_json,
    expand_sweep,
    full_config_hash,
    model_config_hash,
)

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.1f}s")
    log.info("Completed: %s in %.1fs", name, elapsed)


def run_generation(
    config: ExperimentConfig, sweep: bool = False
) -> list[dict[str, float]]:
    """Sample every requested configuration and print its statistics.

    Args:
        config: Loaded experiment config.
        sweep: Expand ``config.sweep`` instead of sampling ``config`` once.

    Returns:
        One statistics dict per sampled configuration, in order.
    """
    from csbm.generation import generate_csbm, sample_statistics

    points = expand_sweep(config) if sweep else [config]
    results: list[dict[str, float]] = []

    for idx, point in enumerate(points):
        m = point.model
        with stage_timer(
            f"Sample {idx + 1}/{len(points)}: N={m.N}, P={m.P}, d={m.d}, "
            f"lam={m.lam}, mu={m.mu}, rho={m.rho}, seed={point.seed}"
        ):
            latents, observations = generate_csbm(point)
            stats = sample_statistics(latents, observations)
            stats["effective_snr"] = m.effective_snr()
            stats["edges"] = float(observations.n_edges)
            for key in sorted(stats):
                print(f"  {key:<18} {stats[key]:.6g}")
        results.append(stats)

    return results


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Sample contextual SBM benchmark instances"
    )
    parser.add_argument(
        "--config",
        type=str,
        required=True,
        help="Path to generation config JSON file",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show generation plan without sampling",
    )
    parser.add_argument(
        "--sweep",
        action="store_true",
        help="Sample every point of the config's sweep grid",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Load config
    config_path = Path(args.config)
    if not config_path.exists():
        print(f"Error: config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)

    try:
        config = config_from_json(config_path.read_text())
    except (ValueError, DaciteError) as exc:
        print(f"Error: invalid config: {exc}", file=sys.stderr)
        sys.exit(1)

    m = config.model
    print(f"Config hash:   {full_config_hash(config)}")
    print(f"Model hash:    {model_config_hash(config)}")
    print()
    print(f"Model:    N={m.N}, P={m.P}, d={m.d}, lam={m.lam}, mu={m.mu}, rho={m.rho}")
    print(f"SNR:      effective={m.effective_snr():.6g}")
    print(f"Seed:     {config.seed}")

    if args.sweep and config.sweep is None:
        print("Error: --sweep given but config has no sweep section", file=sys.stderr)
        sys.exit(1)

    if args.dry_run:
        try:
            points = expand_sweep(config) if args.sweep else [config]
        except ValueError as exc:
            print(f"Error: invalid sweep: {exc}", file=sys.stderr)
            sys.exit(1)
        print(f"\nGeneration plan ({len(points)} sample(s)):")
        for idx, point in enumerate(points):
            pm = point.model
            print(
                f"  {idx + 1}. N={pm.N}, P={pm.P}, d={pm.d}, lam={pm.lam}, "
                f"mu={pm.mu}, rho={pm.rho}, seed={point.seed}, "
                f"effective_snr={pm.effective_snr():.6g}"
            )
        print("\n[dry-run] Config loaded successfully. Exiting.")
        return

    try:
        run_generation(config, sweep=args.sweep)
    except Exception:
        log.exception("Generation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
