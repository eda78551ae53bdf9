from .effect_canvas import EffectCanvas

__all__ = ["EffectCanvas"]
