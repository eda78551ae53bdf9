"""
Shader module.

Importing this package registers every built-in shader with the shader
registry; the set is closed and enumerated below.
"""

from loguru import logger

from .base_shader import (
    Shader,
    ShaderContext,
    SHADER_REGISTRY,
    register_shader,
    get_shader_class,
    require_shader_class,
    list_available_shaders,
)
from .fade import ColorRange, FadeShader
from .dissolve import DissolveShader
from .sweep import SweepShader
from .slide import SlideShader
from .paint import PaintShader
from .expand import ExpandShader


__all__ = [
    'Shader',
    'ShaderContext',
    'SHADER_REGISTRY',
    'register_shader',
    'get_shader_class',
    'require_shader_class',
    'list_available_shaders',
    'ColorRange',
    'FadeShader',
    'DissolveShader',
    'SweepShader',
    'SlideShader',
    'PaintShader',
    'ExpandShader',
]

logger.debug(f"{len(SHADER_REGISTRY)} shaders registered: {', '.join(list_available_shaders())}")
