"""
Render a comet orbit to HTML and JSON.

    orbit-demo --body 2P --ticks 628
    orbit-demo --records comets.json --body "P/2004 R1 (McNaught)"

--records takes a JSON list of element-table rows (object, object_name,
e, i_deg, w_deg, node_deg, q_au_1, q_au_2).
"""

from __future__ import annotations

import argparse
import json
import logging

from orbit_viewer.core.config import EngineConfig
from orbit_viewer.core.constants import DEFAULT_PHASE_STEP_RAD, DEFAULT_SAMPLE_COUNT, TWO_PI
from orbit_viewer.core.errors import OrbitError
from orbit_viewer.simulation.catalog import BodyCatalog
from orbit_viewer.simulation.engine import AnimationDriver
from orbit_viewer.simulation.systems.position_recorder import PositionRecorderSystem
from orbit_viewer.visualization.export_log import export_log_to_json
from orbit_viewer.visualization.plotly_viewer import render_orbit_scene, render_animated_orbit

DEMO_RECORDS = [
    {"object": "1P", "object_name": "Halley", "e": "0.9671", "i_deg": "162.26",
     "w_deg": "111.33", "node_deg": "58.42", "q_au_1": "0.586", "q_au_2": "35.08"},
    {"object": "2P", "object_name": "Encke", "e": "0.8471", "i_deg": "11.78",
     "w_deg": "186.54", "node_deg": "334.57", "q_au_1": "0.336", "q_au_2": "4.09"},
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Animate a body along its Keplerian orbit.")
    parser.add_argument("--records", default=None, help="JSON file with element-table rows (defaults to built-in comets).")
    parser.add_argument("--body", default="2P", help="ID of the body to select.")
    parser.add_argument("--ticks", type=int, default=int(TWO_PI / DEFAULT_PHASE_STEP_RAD) + 1,
                        help="Number of animation ticks to record (default: one revolution).")
    parser.add_argument("--samples", type=int, default=DEFAULT_SAMPLE_COUNT, help="Points in the orbit curve.")
    parser.add_argument("--step", type=float, default=DEFAULT_PHASE_STEP_RAD, help="Phase step per tick (rad).")
    parser.add_argument(
        "--unrotated-focus",
        action="store_true",
        help="Leave the central-body marker at (-c, 0, 0) like the original viewer.",
    )
    parser.add_argument("--out-dir", default="out", help="Output directory.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.records:
        with open(args.records, encoding="utf-8") as f:
            records = json.load(f)
    else:
        records = DEMO_RECORDS

    try:
        config = EngineConfig(
            sample_count=args.samples,
            phase_step_rad=args.step,
            rotate_focus_marker=not args.unrotated_focus,
        )
        catalog = BodyCatalog(name="demo")
        catalog.add_records(records)
        catalog.select(args.body)

        driver = AnimationDriver(config=config, systems=[PositionRecorderSystem()])
        log = driver.run(catalog, n_ticks=args.ticks)
    except (OrbitError, KeyError, ValueError) as exc:
        raise SystemExit(f"orbit-demo: {exc}")

    paths = [
        render_orbit_scene(log, out_html=f"{args.out_dir}/orbit_scene.html"),
        render_animated_orbit(log, out_html=f"{args.out_dir}/orbit_animated.html"),
        export_log_to_json(log, out_path=f"{args.out_dir}/orbit_log.json"),
    ]

    print("Wrote:")
    for p in paths:
        print(" -", p)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
