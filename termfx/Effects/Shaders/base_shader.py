"""
Base class and registration system for shaders.

A shader is a pure per-cell transform: given the cell's alpha, its position,
its current content and the per-tick context, it returns the new cell. All
parameters live on the (frozen) shader instance; all time-dependent state
lives on the owning effect's timer.
"""

from typing import Dict, List, NamedTuple, Optional, Type

from loguru import logger

from ..color_space import ColorSpace
from ..fx_errors import UnknownNameError
from ...Utils.cell_buffer import Cell
from ...Utils.geometry import Position, Rect


class ShaderContext(NamedTuple):
    """Per-tick values shared by every cell an effect visits."""
    area: Rect
    color_space: ColorSpace


class Shader:
    """Base class for shaders."""

    # Set by @register_shader
    _shader_name: str = "shader"

    @property
    def name(self) -> str:
        return self._shader_name

    def apply(self, alpha: float, position: Position, cell: Cell, context: ShaderContext) -> Cell:
        """Return the transformed cell. ``alpha`` is already clamped to [0, 1]."""
        raise NotImplementedError


# Shader registration system
SHADER_REGISTRY: Dict[str, Type[Shader]] = {}


def register_shader(name: str):
    """
    Decorator to register a shader class.

    Usage:
        @register_shader("fade")
        class FadeShader(Shader):
            ...
    """
    def decorator(cls):
        if name in SHADER_REGISTRY:
            logger.warning(f"Shader '{name}' is already registered, overwriting...")
        SHADER_REGISTRY[name] = cls
        cls._shader_name = name  # Store the registration name on the class
        logger.debug(f"Registered shader: {name} -> {cls.__name__}")
        return cls
    return decorator


def get_shader_class(name: str) -> Optional[Type[Shader]]:
    """Get a shader class by its registered name."""
    return SHADER_REGISTRY.get(name)


def require_shader_class(name: str) -> Type[Shader]:
    """Get a shader class by name, raising if it is not registered."""
    shader_cls = get_shader_class(name)
    if shader_cls is None:
        raise UnknownNameError.for_lookup("shader", name, SHADER_REGISTRY.keys())
    return shader_cls


def list_available_shaders() -> List[str]:
    """Get a list of all registered shader names."""
    return sorted(SHADER_REGISTRY.keys())
