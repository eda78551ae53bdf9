"""
Terminal cell effects.

Effects are time-driven transformations over a CellBuffer: a shader animated
by an EffectTimer, scoped by a CellFilter, a Pattern and an optional area, and
composed with ``fx.sequence`` / ``fx.parallel``. An EffectManager drives the
active effects once per frame.
"""

from .duration import Duration, ZERO
from .interpolation import Interpolation
from .effect_timer import EffectTimer
from .color_space import ColorSpace
from .motion import ExpandDirection, LoopMode, Motion
from .cell_filter import ALL, CellFilter
from .patterns import (
    DiagonalDirection,
    DiagonalPattern,
    IDENTITY,
    IdentityPattern,
    Pattern,
    RadialPattern,
    SweepPattern,
)
from .sliding_window import SlidingWindowAlpha
from .base_effect import BaseEffect
from .effect import Effect
from .composite import ParallelEffect, SequentialEffect
from .effect_manager import EffectManager
from .fx_errors import (
    EffectConfigurationError,
    EffectError,
    EmptyCompositeError,
    InvalidDurationError,
    UnknownNameError,
)
from . import fx


__all__ = [
    'Duration',
    'ZERO',
    'Interpolation',
    'EffectTimer',
    'ColorSpace',
    'ExpandDirection',
    'LoopMode',
    'Motion',
    'ALL',
    'CellFilter',
    'DiagonalDirection',
    'DiagonalPattern',
    'IDENTITY',
    'IdentityPattern',
    'Pattern',
    'RadialPattern',
    'SweepPattern',
    'SlidingWindowAlpha',
    'BaseEffect',
    'Effect',
    'ParallelEffect',
    'SequentialEffect',
    'EffectManager',
    'EffectConfigurationError',
    'EffectError',
    'EmptyCompositeError',
    'InvalidDurationError',
    'UnknownNameError',
    'fx',
]
