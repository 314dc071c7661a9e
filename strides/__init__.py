# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Strides: lazy, stateful numeric ranges with exclusive, inclusive, and unbounded stops.
'''

from .io import err_trace, trace_pulls
from .range import ExclusiveRange, InclusiveRange, UnboundedRange, with_step
from .types import Steppable, StepBy
