# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from itertools import islice

from strides.range import ExclusiveRange, InclusiveRange, UnboundedRange, with_step
from utest import utest, utest_call, utest_exc, utest_repr, utest_seq, utest_val


utest_seq([0, 2, 4], ExclusiveRange(0, 5, 1).with_step, 2)
utest_seq([0, 2, 4], ExclusiveRange(0, 5, 1).step_by, 2)
utest_seq([0, 2, 4], with_step, ExclusiveRange(0, 5, 1), 2)
utest_seq([0, 3, 6], InclusiveRange(0, 6, 1).with_step, 3)
utest_seq([0, 5, 10], islice, UnboundedRange(0, 1).with_step(5), 3)
utest_seq([0, 5, 10], islice, with_step(UnboundedRange(0, 1), 5), 3)

# No validation of the new step.
utest_seq([0] * 5, islice, ExclusiveRange(0, 3, 1).with_step(0), 5)
utest_seq([0, -2, -4], islice, InclusiveRange(0, 3, 1).with_step(-2), 3)

utest_exc(TypeError('with_step requires a range; received: range(0, 3)'), with_step, range(3), 2)
utest_exc(TypeError, with_step, 0, 2)


@utest_call
def test_rebind_after_pulls() -> None:
  r = ExclusiveRange(0, 10, 1)
  utest_seq([0, 1], islice, r, 2)
  s = r.with_step(3)
  utest_val(ExclusiveRange, type(s))
  utest_repr('ExclusiveRange(2, 10, 3)', lambda: s)
  utest_seq([2, 5, 8], list, s)
  # The original range is untouched and advances independently.
  utest_val(2, r.start)
  utest_val(1, r.step)
  utest(2, r.pull)


@utest_call
def test_rebind_unbounded() -> None:
  r = UnboundedRange(10, 1)
  utest(10, r.pull)
  s = with_step(r, 10)
  utest_val(UnboundedRange, type(s))
  utest_seq([11, 21, 31], islice, s, 3)


@utest_call
def test_rebind_exhausted() -> None:
  r = ExclusiveRange(0, 2, 1)
  utest_seq([0, 1], list, r)
  s = r.with_step(-1)
  utest_val(True, s.exhausted)
  utest(None, s.pull)
  utest_val(2, s.start)
  utest_val(False, ExclusiveRange(0, 2, 1).with_step(2).exhausted)


@utest_call
def test_rebind_subclass() -> None:
  class Ticks(InclusiveRange):
    pass
  t = Ticks(0, 4, 1).with_step(2)
  utest_val(Ticks, type(t))
  utest_seq([0, 2, 4], list, t)
