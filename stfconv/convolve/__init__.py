# stfconv/convolve/__init__.py
"""
Convolution of source time functions onto records.

Pipeline, leaf-first:
- stf: unit-area source kernels per record
- validate: records must be evenly sampled time series / XY
- delay: integer sample shift of each centered kernel
- engine: linear convolution split into record span + edge tails
- attach: edge tails re-attached to the records
"""

from .stf import SourceKernel, SOURCE_FUNCTIONS, gaussian_tf, triangle_tf, source_kernel, make_source_timefunction
from .validate import CONVOLVABLE_IFTYPES, validate_convolvable
from .delay import round_half_away, resolve_delays, kernel_delays
from .engine import ConvolutionResult, convolve_samples, convolve_records, apply_results
from .attach import attach
from .pipeline import convolve_source_timefunction


__all__ = [
    # source functions
    "SourceKernel",
    "SOURCE_FUNCTIONS",
    "gaussian_tf",
    "triangle_tf",
    "source_kernel",
    "make_source_timefunction",

    # components
    "CONVOLVABLE_IFTYPES",
    "validate_convolvable",
    "round_half_away",
    "resolve_delays",
    "kernel_delays",
    "ConvolutionResult",
    "convolve_samples",
    "convolve_records",
    "apply_results",
    "attach",

    # pipeline
    "convolve_source_timefunction",
]
