#!/usr/bin/env python3
"""
Render the built-in scene to an image file.
Optionally exports PNG, shows the result, or previews the 3D layout.
"""

import argparse
import dataclasses
import logging
from pathlib import Path

from camera import Camera
from image_io import save_png, show_image, write_ppm
from render import render_framebuffer
from scene import default_scene

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Whitted-style ray tracer")
    parser.add_argument("--width", type=int, default=1024, help="Image width in pixels")
    parser.add_argument("--height", type=int, default=768, help="Image height in pixels")
    parser.add_argument("--fov", type=float, default=1.05,
                        help="Vertical field of view in radians")
    parser.add_argument("--max-depth", type=int, default=default_scene().max_depth,
                        help="Maximum reflection/refraction recursion depth")
    parser.add_argument("--workers", type=int, default=None,
                        help="Parallel workers (1 = serial, default: executor default)")
    parser.add_argument("--processes", action="store_true", default=False,
                        help="Use worker processes instead of threads")
    parser.add_argument("--output", type=Path, default=Path("out.ppm"),
                        help="Output PPM path")
    parser.add_argument("--png", type=Path, default=None,
                        help="Also save a PNG copy")
    parser.add_argument("--show", action="store_true", default=False,
                        help="Display the rendered image with matplotlib")
    parser.add_argument("--preview", action="store_true", default=False,
                        help="Show the 3D scene layout instead of rendering")
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="Debug logging")
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    try:
        camera = Camera(width=args.width, height=args.height, fov=args.fov)
        scene = dataclasses.replace(default_scene(), max_depth=args.max_depth)
    except ValueError as e:
        parser.error(str(e))
    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be >= 1")

    if args.preview:
        from visualization import create_scene_preview
        print("Opening scene preview...")
        create_scene_preview(scene).show()
        return 0

    print(f"Tracing {camera.width}x{camera.height} pixels...")
    fb = render_framebuffer(scene, camera, workers=args.workers,
                            use_processes=args.processes)

    write_ppm(args.output, fb)
    print(f"Saved {args.output}")
    if args.png is not None:
        save_png(args.png, fb)
        print(f"Saved {args.png}")
    if args.show:
        show_image(fb)

    print("Done!")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
