# main.py
import argparse
import logging
import math
import sys
from typing import List, Optional, Tuple

import numpy as np
import pygame

from camera.camera import Camera
from core.logging_config import setup_logging
from core.vector import Vector3
from geometry.plane import Plane
from geometry.sphere import Sphere
from materials.presets import ColorPresets, MetalPresets
from renderer.framebuffer import Framebuffer
from renderer.ppm import gradient_framebuffer, save_image
from renderer.raytracer import MAX_DEPTH, QUALITY_LEVELS, Renderer, RenderSettings
from scene.light import PointLight
from scene.loader import SceneError, load_scene
from scene.scene import Scene

logger = logging.getLogger("main")

def create_world() -> Scene:
    """Built-in demo: three spheres and a mirror over a floor, lit by two lights."""
    scene = Scene(ambient=Vector3(0.1, 0.1, 0.1), background=Vector3(0.05, 0.07, 0.12))

    scene.add(Plane(Vector3(0, -1, 0), Vector3(0, 1, 0), ColorPresets.matte(ColorPresets.GRAY)))
    scene.add(Sphere(Vector3(0, 0, -5), 1.0, ColorPresets.plastic(ColorPresets.RED)))
    scene.add(Sphere(Vector3(-2.2, -0.3, -6), 0.7, ColorPresets.plastic(ColorPresets.BLUE)))
    scene.add(Sphere(Vector3(2.3, 0.2, -6.5), 1.2, MetalPresets.mirror()))
    scene.add(Sphere(Vector3(0.8, -0.7, -3.5), 0.3, MetalPresets.gold()))

    scene.add_light(PointLight(Vector3(5, 5, 0), Vector3(0.8, 0.8, 0.8)))
    scene.add_light(PointLight(Vector3(-4, 3, -2), Vector3(0.3, 0.3, 0.4)))
    return scene

def create_camera(width: int, height: int) -> Camera:
    return Camera(Vector3(0, 0, 0), yaw=0.0, pitch=0.0, fov=math.radians(60),
                  width=width, height=height)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Phong ray tracer with shadows and mirror reflections")
    parser.add_argument("scene_file", nargs="?", default=None,
                        help="JSON scene description (default: built-in demo scene)")
    parser.add_argument("-o", "--output", default="render.ppm",
                        help="Output image; .ppm is written directly, other extensions via Pillow")
    parser.add_argument("--width", type=int, default=None, help="Image width")
    parser.add_argument("--height", type=int, default=None, help="Image height")
    parser.add_argument("--max-depth", type=int, default=None,
                        help=f"Maximum mirror recursion depth (default: {MAX_DEPTH})")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default=None,
                        help="Named recursion depth preset")
    parser.add_argument("--workers", type=int, default=None,
                        help="Worker processes rendering row bands (default: 1)")
    parser.add_argument("--gamma", type=float, default=None,
                        help="Apply gamma correction before quantization")
    parser.add_argument("--ascii", action="store_true", help="Write ASCII P3 instead of binary P6")
    parser.add_argument("--pattern", action="store_true",
                        help="Write the gradient test pattern instead of rendering")
    parser.add_argument("--preview", action="store_true",
                        help="Show the result in a window until it is closed")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    return parser.parse_args(argv)

def resolve(args: argparse.Namespace) -> Tuple[Scene, Camera, RenderSettings]:
    """Combines the scene source with command-line overrides."""
    if args.scene_file is not None:
        scene, camera, settings = load_scene(args.scene_file)
    else:
        scene = create_world()
        camera = create_camera(640, 480)
        settings = RenderSettings()

    if args.width is not None or args.height is not None:
        camera = Camera(camera.position, camera.yaw, camera.pitch, camera.fov,
                        args.width if args.width is not None else camera.width,
                        args.height if args.height is not None else camera.height)

    if args.quality is not None:
        settings = RenderSettings.from_quality(args.quality, epsilon=settings.epsilon,
                                               workers=settings.workers)
    settings = RenderSettings(
        max_depth=args.max_depth if args.max_depth is not None else settings.max_depth,
        epsilon=settings.epsilon,
        workers=args.workers if args.workers is not None else settings.workers,
    )
    return scene, camera, settings

def show_preview(framebuffer: Framebuffer):
    """Displays the clamped image in a pygame window until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((framebuffer.width, framebuffer.height))
        pygame.display.set_caption("Ray Tracer Preview")
        # surfarray is indexed (x, y)
        frame = np.transpose(np.clip(framebuffer.data, 0.0, 1.0), (1, 0, 2))
        screen.blit(pygame.surfarray.make_surface((frame * 255).astype(np.uint8)), (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.pattern:
            framebuffer = gradient_framebuffer(args.width if args.width is not None else 500,
                                               args.height if args.height is not None else 500)
        else:
            scene, camera, settings = resolve(args)
            framebuffer = Renderer(scene, camera, settings).render()
        save_image(framebuffer, args.output, binary=not args.ascii, gamma=args.gamma)
    except (SceneError, ValueError, OSError) as e:
        logger.error("%s", e)
        return 1

    if args.preview:
        show_preview(framebuffer)
    return 0

if __name__ == "__main__":
    sys.exit(main())
