"""Render one configured gauge to a PNG preview and a JSON geometry dump."""

from __future__ import annotations

import argparse
from dataclasses import asdict, replace
import json
import logging
from pathlib import Path
import sys
from typing import Any

# Add `src` to sys.path so this script works even before `pip install -e .`.
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
SRC_DIR: Path = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from gauge_layout.config import (
    PRESETS_TOML_PATH,
    GaugeConfig,
    GaugeConfigError,
    load_gauge_configs,
)
from gauge_layout.layout import GaugeLayout, compute_gauge_layout
from gauge_layout.logging_config import setup_logging
from gauge_layout.raster import rasterize, write_png
from gauge_layout.render import build_primitives


def parse_args() -> argparse.Namespace:
    """Parse CLI arguments for one preview render."""
    parser = argparse.ArgumentParser(description="Render a gauge preview.")
    parser.add_argument("--config", type=Path, default=PRESETS_TOML_PATH)
    parser.add_argument("--gauge-id", type=str, default="percent")
    parser.add_argument(
        "--data",
        type=float,
        default=None,
        help="Override the needle value (bypasses the configured accessor).",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=PROJECT_ROOT / "artifacts" / "previews",
    )
    parser.add_argument("--verbose", action="store_true", help="Log pipeline details.")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs here.")
    return parser.parse_args()


def layout_payload(layout: GaugeLayout) -> dict[str, Any]:
    """Convert the computed geometry to plain JSON-friendly values."""
    return {
        "gauge_id": layout.config.gauge_id,
        "domain": asdict(layout.domain),
        "radius": asdict(layout.radius),
        "inner_radius": layout.inner_radius,
        "segment_spans": layout.segment_spans,
        "segments": [asdict(arc) for arc in layout.segments],
        "segment_fills": layout.segment_fills,
        "gauge_range": asdict(layout.gauge_range),
        "ticks": [asdict(tick) for tick in layout.ticks],
        "data_value": layout.data_value,
        "needle_rotation": layout.needle_rotation,
    }


def main() -> None:
    """Compute the gauge layout, then write the preview and geometry files."""
    args = parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    configs: dict[str, GaugeConfig] = load_gauge_configs(args.config)
    if args.gauge_id not in configs:
        raise GaugeConfigError(
            f"Gauge {args.gauge_id!r} not in {args.config}; have {sorted(configs)}."
        )
    config: GaugeConfig = configs[args.gauge_id]
    if args.data is not None:
        config = replace(config, data=args.data, data_accessor=None)

    layout: GaugeLayout = compute_gauge_layout(config)
    image = rasterize(layout, build_primitives(layout))

    png_path: Path = write_png(args.output_dir / f"{config.gauge_id}.png", image)
    json_path: Path = args.output_dir / f"{config.gauge_id}.json"
    json_path.write_text(json.dumps(layout_payload(layout), indent=2), encoding="utf-8")

    # Print a concise summary for quick feedback in terminal.
    print(f"Preview: {png_path}")
    print(f"Geometry: {json_path}")
    print(f"Needle rotation: {layout.needle_rotation:.2f} degrees")


if __name__ == "__main__":
    main()
