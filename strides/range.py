# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Lazy, stateful numeric ranges.

Each range is its own iterator: a pull returns the cursor (`start`) and then advances it by adding `step`.
Bounded ranges check a guard before each pull: `start < stop` for `ExclusiveRange`, `start <= stop` for `InclusiveRange`.
The first failed check exhausts the range permanently.
`UnboundedRange` has no stop and never ends.
'''

from dataclasses import dataclass, field, replace
from operator import le, lt
from typing import Any, Callable, ClassVar, Generic, Self, TypeVar

from .types import Steppable, StepBy


_T = TypeVar('_T', bound=Steppable)
_S = TypeVar('_S')
_R = TypeVar('_R', bound=StepBy)

_setattr = object.__setattr__


class _Advancing(Generic[_T, _S]):
  '''
  Capture-and-advance behavior shared by all range variants.
  Subclasses are frozen dataclasses declaring `start` and `step`; the cursor is written through `object.__setattr__`,
  so that it cannot be assigned from outside.
  '''

  start:_T
  step:_S

  def __iter__(self) -> Self:
    return self

  def _advance(self) -> _T:
    'Advance the cursor by `step` and return its previous value.'
    cursor = self.start
    _setattr(self, 'start', cursor + self.step)
    return cursor

  def with_step(self, step:_S) -> Self:
    '''
    Return a new range of the same type with `step` replaced.
    The cursor and any stop bound are copied, so values already pulled are unaffected.
    The new range and `self` advance independently; callers should continue with the returned range.
    '''
    return replace(self, step=step)

  def step_by(self, step:_S) -> Self:
    return self.with_step(step)


@dataclass(frozen=True, eq=False, repr=False)
class _BoundedRange(_Advancing[_T, _S]):
  start:_T
  stop:_T
  step:_S
  exhausted:bool = field(default=False, init=False)

  _guard:ClassVar[Callable[[Any, Any], bool]]

  def __next__(self) -> _T:
    if not self.exhausted:
      if self._guard(self.start, self.stop): return self._advance()
      _setattr(self, 'exhausted', True)
    raise StopIteration

  def pull(self) -> _T|None:
    'Return the next value, or None once the range is exhausted.'
    return next(self, None)

  def with_step(self, step:_S) -> Self:
    r = super().with_step(step)
    _setattr(r, 'exhausted', self.exhausted) # `replace` resets non-init fields.
    return r

  def __repr__(self) -> str:
    return f'{type(self).__name__}({self.start!r}, {self.stop!r}, {self.step!r})'


@dataclass(frozen=True, eq=False, repr=False)
class ExclusiveRange(_BoundedRange[_T, _S]):
  '''
  A range that yields `start`, `start+step`, ... while the cursor is less than `stop`.
  A zero or negative step with `start < stop` never terminates; `start >= stop` yields nothing.
  '''
  _guard = staticmethod(lt)


@dataclass(frozen=True, eq=False, repr=False)
class InclusiveRange(_BoundedRange[_T, _S]):
  '''
  A range that yields `start`, `start+step`, ... while the cursor is less than or equal to `stop`.
  Whether a float progression lands exactly on `stop` depends on rounding of the additions.
  '''
  _guard = staticmethod(le)


@dataclass(frozen=True, eq=False, repr=False)
class UnboundedRange(_Advancing[_T, _S]):
  'A range that yields `start`, `start+step`, ... forever.'

  start:_T
  step:_S

  def __next__(self) -> _T:
    return self._advance()

  def pull(self) -> _T:
    return self._advance()

  def __repr__(self) -> str:
    return f'{type(self).__name__}({self.start!r}, {self.step!r})'


def with_step(r:_R, step:Any) -> _R:
  'Return a new range of the same type as `r`, with `step` replaced.'
  try: rebind = r.with_step
  except AttributeError: raise TypeError(f'with_step requires a range; received: {r!r}') from None
  return rebind(step)
