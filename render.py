#!/usr/bin/env python3
"""
Pixel driver: casts one primary ray per pixel and fills the framebuffer.
Rows are independent, so they are traced in parallel and each task writes
only its own row.
"""

import logging
import time
import numpy as np
from concurrent.futures import ThreadPoolExecutor, ProcessPoolExecutor, as_completed
from typing import Optional

from camera import Camera
from ray_tracer import cast_ray
from scene import Scene

logger = logging.getLogger(__name__)

def render_row(scene: Scene, camera: Camera, j: int) -> np.ndarray:
    """Trace row j and return a (width, 3) array of linear colors."""
    row = np.empty((camera.width, 3))
    orig = camera.origin
    for i, d in enumerate(camera.row_directions(j)):
        row[i] = cast_ray(orig, d, 0, scene)
    return row

def render_framebuffer_serial(scene: Scene, camera: Camera) -> np.ndarray:
    """Trace every row in order on the calling thread."""
    fb = np.empty((camera.height, camera.width, 3))
    for j in range(camera.height):
        fb[j] = render_row(scene, camera, j)
    return fb

def render_framebuffer(scene: Scene, camera: Camera,
                       workers: Optional[int] = None,
                       use_processes: bool = False) -> np.ndarray:
    """
    Render the full image as a (height, width, 3) float array.
    workers=1 renders serially; otherwise rows go to a thread pool, or a
    process pool when use_processes is set.
    """
    t_start = time.perf_counter()
    logger.info("Rendering %dx%d, max depth %d, %s workers",
                camera.width, camera.height, scene.max_depth,
                workers if workers is not None else "default")

    if workers == 1:
        fb = render_framebuffer_serial(scene, camera)
    else:
        fb = np.empty((camera.height, camera.width, 3))
        pool_cls = ProcessPoolExecutor if use_processes else ThreadPoolExecutor
        with pool_cls(max_workers=workers) as ex:
            futs = {ex.submit(render_row, scene, camera, j): j for j in range(camera.height)}
            done = 0
            for f in as_completed(futs):
                j = futs[f]
                fb[j] = f.result()
                done += 1
                if done % 64 == 0:
                    logger.debug("%d/%d rows done", done, camera.height)

    logger.info("Rendered in %.2f s", time.perf_counter() - t_start)
    return fb
