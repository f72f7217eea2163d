"""Scene loading and validation from a JSON scene description."""
import json
import logging
import math
from typing import Any, Dict, Tuple

from camera.camera import Camera
from core.vector import Vector3
from geometry import PRIMITIVE_TYPES, Hittable, Plane, Sphere, Triangle
from materials.material import Material
from materials.presets import MATERIAL_PRESETS, material_preset
from renderer.raytracer import RenderSettings
from scene.light import PointLight
from scene.scene import Scene

logger = logging.getLogger(__name__)

class SceneError(ValueError):
    """Raised when a scene description is malformed."""

def load_scene(json_path: str) -> Tuple[Scene, Camera, RenderSettings]:
    """Load a scene, its camera and render settings from a JSON file."""
    try:
        with open(json_path, "r") as f:
            description = json.load(f)
    except json.JSONDecodeError as e:
        raise SceneError(f"{json_path}: invalid JSON: {e}") from e
    logger.info("Loading scene from %s", json_path)
    return build_scene(description)

def build_scene(description: Dict[str, Any]) -> Tuple[Scene, Camera, RenderSettings]:
    """Build a scene from an already parsed description, failing fast on bad input."""
    if not isinstance(description, dict):
        raise SceneError("scene description must be an object")

    camera = build_camera(_require(description, "camera", "scene"))
    scene = Scene(
        ambient=_color(description.get("ambient", [0.1, 0.1, 0.1]), "ambient"),
        background=_color(description.get("background", [0.0, 0.0, 0.0]), "background"),
    )
    for i, light in enumerate(_list(description.get("lights", []), "lights")):
        scene.add_light(build_light(light, f"lights[{i}]"))
    for i, obj in enumerate(_list(description.get("objects", []), "objects")):
        scene.add(build_object(obj, f"objects[{i}]"))

    render = description.get("render", {})
    if not isinstance(render, dict):
        raise SceneError("render must be an object")
    params = {}
    for key in ("max_depth", "workers"):
        if key in render:
            params[key] = _integer(render[key], f"render.{key}")
    if "epsilon" in render:
        params["epsilon"] = _number(render["epsilon"], "render.epsilon")
    try:
        settings = RenderSettings(**params)
    except ValueError as e:
        raise SceneError(f"render: {e}") from e

    logger.info("Built scene: %d objects, %d lights, camera %dx%d",
                len(scene.objects), len(scene.lights), camera.width, camera.height)
    return scene, camera, settings

def build_camera(desc: Dict[str, Any]) -> Camera:
    where = "camera"
    _require_dict(desc, where)
    position = _vector(_require(desc, "position", where), f"{where}.position")
    fov_deg = _number(desc.get("fov", 60.0), f"{where}.fov")
    if not 0.0 < fov_deg < 180.0:
        raise SceneError(f"{where}.fov must be in (0, 180) degrees, got {fov_deg}")
    width = _integer(desc.get("width", 320), f"{where}.width")
    height = _integer(desc.get("height", 240), f"{where}.height")
    if width <= 0 or height <= 0:
        raise SceneError(f"{where}: width and height must be positive integers")

    fov = math.radians(fov_deg)
    if "look_at" in desc:
        target = _vector(desc["look_at"], f"{where}.look_at")
        if (target - position).is_zero():
            raise SceneError(f"{where}.look_at must differ from {where}.position")
        return Camera.look_at(position, target, fov, width, height)
    yaw = math.radians(_number(desc.get("yaw", 0.0), f"{where}.yaw"))
    pitch = math.radians(_number(desc.get("pitch", 0.0), f"{where}.pitch"))
    return Camera(position, yaw, pitch, fov, width, height)

def build_light(desc: Dict[str, Any], where: str) -> PointLight:
    _require_dict(desc, where)
    position = _vector(_require(desc, "position", where), f"{where}.position")
    color = _color(desc.get("color", [1.0, 1.0, 1.0]), f"{where}.color")
    return PointLight(position, color)

def build_material(desc: Any, where: str) -> Material:
    if isinstance(desc, str):
        if desc not in MATERIAL_PRESETS:
            raise SceneError(f"{where}: unknown material preset {desc!r}, "
                             f"expected one of {sorted(MATERIAL_PRESETS)}")
        return material_preset(desc)
    _require_dict(desc, where)
    diffuse = _color(_require(desc, "diffuse", where), f"{where}.diffuse")
    specular = _color(desc.get("specular", [0.0, 0.0, 0.0]), f"{where}.specular")
    shininess = _number(desc.get("shininess", 32.0), f"{where}.shininess")
    reflectivity = _number(desc.get("reflectivity", 0.0), f"{where}.reflectivity")
    try:
        return Material(diffuse, specular, shininess, reflectivity)
    except ValueError as e:
        raise SceneError(f"{where}: {e}") from e

def build_object(desc: Dict[str, Any], where: str) -> Hittable:
    _require_dict(desc, where)
    kind = _require(desc, "type", where)
    if kind not in PRIMITIVE_TYPES:
        raise SceneError(f"{where}: unknown object type {kind!r}, "
                         f"expected one of {sorted(PRIMITIVE_TYPES)}")
    material = build_material(_require(desc, "material", where), f"{where}.material")

    if kind == "sphere":
        center = _vector(_require(desc, "center", where), f"{where}.center")
        radius = _number(_require(desc, "radius", where), f"{where}.radius")
        if radius <= 0:
            raise SceneError(f"{where}.radius must be positive, got {radius}")
        return Sphere(center, radius, material)

    if kind == "plane":
        point = _vector(_require(desc, "point", where), f"{where}.point")
        normal = _vector(_require(desc, "normal", where), f"{where}.normal")
        if normal.is_zero():
            raise SceneError(f"{where}.normal must not be zero")
        return Plane(point, normal, material)

    vertices = _list(_require(desc, "vertices", where), f"{where}.vertices")
    if len(vertices) != 3:
        raise SceneError(f"{where}.vertices must hold 3 points, got {len(vertices)}")
    v0, v1, v2 = (_vector(v, f"{where}.vertices[{i}]") for i, v in enumerate(vertices))
    if (v1 - v0).cross(v2 - v0).is_zero():
        raise SceneError(f"{where}: degenerate triangle")
    return Triangle(v0, v1, v2, material)

def _require(desc: Dict[str, Any], key: str, where: str) -> Any:
    try:
        return desc[key]
    except KeyError:
        raise SceneError(f"{where}: missing required key {key!r}") from None

def _require_dict(desc: Any, where: str):
    if not isinstance(desc, dict):
        raise SceneError(f"{where} must be an object")

def _list(value: Any, where: str) -> list:
    if not isinstance(value, list):
        raise SceneError(f"{where} must be a list")
    return value

def _number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise SceneError(f"{where} must be a finite number, got {value!r}")
    return float(value)

def _integer(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SceneError(f"{where} must be an integer, got {value!r}")
    return value

def _vector(value: Any, where: str) -> Vector3:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise SceneError(f"{where} must be a list of 3 numbers, got {value!r}")
    return Vector3(*(_number(v, where) for v in value))

def _color(value: Any, where: str) -> Vector3:
    color = _vector(value, where)
    if color.x < 0 or color.y < 0 or color.z < 0:
        raise SceneError(f"{where} channels must be non-negative, got {value!r}")
    return color
