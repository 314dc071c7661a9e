# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Diagnostic output to std err, and tracing of range pulls.
'''

import sys
from typing import Any, Iterable, Iterator, TextIO, TypeVar


_T = TypeVar('_T')


def writeL(file:TextIO, *items:Any, sep='', flush=False) -> None:
  "Write `items` to file; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=file, flush=flush)

def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=sys.stderr, flush=flush)


def trace_pulls(iterable:Iterable[_T], label='pull', file:TextIO|None=None) -> Iterator[_T]:
  '''
  Return a generator that yields the elements of `iterable` unchanged,
  writing a line for each element to `file` (default std err): `◊ {label} {index}: {value!r}`.
  When `iterable` ends, a final line reports the count.
  Nothing is pulled until the generator is advanced, so unbounded ranges can be traced with `islice`.
  '''
  def trace_pulls_gen() -> Iterator[_T]:
    f = sys.stderr if file is None else file
    count = 0
    for el in iterable:
      writeL(f, f'◊ {label} {count}: {el!r}', flush=True)
      yield el
      count += 1
    writeL(f, f'◊ {label}: end after {count}.', flush=True)
  return trace_pulls_gen()


def err_trace(iterable:Iterable[_T], label='pull') -> Iterator[_T]:
  'Trace the elements of `iterable` to std err; see `trace_pulls`.'
  return trace_pulls(iterable, label=label)
