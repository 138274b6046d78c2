"""Reduction strategies: call-by-value evaluation and full normalization."""

from .cbv import eval_step, evaluate
from .normalize import head_step, normalize, normalize_step

__all__ = ["eval_step", "evaluate", "head_step", "normalize", "normalize_step"]
