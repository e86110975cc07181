#!/usr/bin/env python
"""
PolyArea Performance Benchmark Suite

Measures the interactive paths (hit testing, dragging, rendering) with a
large scene and reports timings against the profiler targets.

Usage:
    python -m benchmarks.run_benchmarks
    python -m benchmarks.run_benchmarks --polygons 1000 --output report.json
"""

import argparse
import json
import logging
from pathlib import Path

from polyarea.utils.profiling import profiler, profile_block

logger = logging.getLogger("polyarea.benchmarks")


def benchmark_imports():
    """Benchmark module import times."""
    logger.info("Benchmarking imports...")

    with profile_block("import_numpy"):
        import numpy  # noqa: F401

    with profile_block("import_cv2"):
        import cv2  # noqa: F401

    with profile_block("import_polyarea_core"):
        from polyarea.core import EditorSession, Renderer  # noqa: F401


def build_scene(count: int):
    """Session holding ``count`` closed hexagon-ish polygons on a grid."""
    from polyarea.core import EditorSession

    session = EditorSession()
    columns = 40
    for i in range(count):
        x = (i % columns) * 30 + 15
        y = (i // columns) * 30 + 15
        for dx, dy in [(0, 0), (20, 0), (25, 10), (20, 20), (0, 20), (-5, 10)]:
            session.place_vertex((x + dx, y + dy))
        session.try_close((x, y))
    return session


def benchmark_construction(count: int):
    """Benchmark placing and closing polygons."""
    logger.info("Benchmarking construction of %d polygons...", count)

    with profile_block("construction"):
        session = build_scene(count)
    return session


def benchmark_hit_testing(session, samples: int = 500):
    """Benchmark hover hit tests across the whole scene."""
    logger.info("Benchmarking hit testing...")

    # Worst case: nothing under the cursor, every vertex is checked
    with profile_block("hit_test_miss"):
        for i in range(samples):
            session.update_hover((-100 - i, -100))

    last = session.store[len(session.store) - 1].points[0]
    with profile_block("hit_test_last_polygon"):
        for _ in range(samples):
            session.update_hover(last)


def benchmark_drag(session, steps: int = 200):
    """Benchmark dragging a stored vertex with live area updates."""
    logger.info("Benchmarking vertex drag...")

    start = session.store[0].points[0]
    session.begin_drag(start)
    with profile_block("drag_steps"):
        for i in range(steps):
            session.continue_drag((start.x + i % 10, start.y + i % 7))
    session.end_drag()


def benchmark_canvas_render(session, width: int = 1280, height: int = 800):
    """Benchmark rendering with and without the cached polygon layer."""
    logger.info("Benchmarking canvas rendering...")

    from polyarea.core import Renderer

    renderer = Renderer()

    for _ in range(5):
        renderer.invalidate_cache()
        with profile_block("render_uncached"):
            renderer.render(session, width, height)

    # Chain in progress on top of the cached layer
    session.place_vertex((10, 10))
    for i in range(20):
        session.update_preview((10 + i * 5, 10 + i * 3))
        renderer.render(session, width, height)
    session.cancel()


def main():
    parser = argparse.ArgumentParser(description="PolyArea Performance Benchmarks")
    parser.add_argument("--polygons", type=int, default=500,
                        help="Number of polygons in the benchmark scene")
    parser.add_argument("--output", type=str, help="Path to save benchmark report (JSON)")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    logger.info("=" * 60)
    logger.info("PolyArea Performance Benchmark Suite")
    logger.info("=" * 60)

    benchmark_imports()

    session = benchmark_construction(args.polygons)

    benchmark_hit_testing(session)

    benchmark_drag(session)

    benchmark_canvas_render(session)

    profiler.log_summary()

    if args.output:
        output_path = Path(args.output)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(profiler.get_summary(), f, indent=2)
        logger.info("Report saved to: %s", output_path)


if __name__ == "__main__":
    main()
