# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Capability protocols for range values and ranges.
'''

from abc import abstractmethod
from typing import Any, Protocol, Self, TypeVar


class Steppable(Protocol):
  '''
  An ordered value that can be advanced by adding a step, e.g. `int`, `float`, `Fraction` or `Decimal`.
  The step type need not match; `int + float` produces a float cursor.
  Implementations are expected to be immutable, so that capturing the cursor is a copy.
  '''

  @abstractmethod
  def __lt__(self, other:Any) -> bool: ...

  @abstractmethod
  def __le__(self, other:Any) -> bool: ...

  @abstractmethod
  def __add__(self, other:Any) -> Any: ...


_S_contra = TypeVar('_S_contra', contravariant=True)


class StepBy(Protocol[_S_contra]):
  'A range whose step can be rebound, producing a new range of the same type.'

  @abstractmethod
  def with_step(self, step:_S_contra) -> Self: ...
