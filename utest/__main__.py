#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, makedirs, walk
from os.path import isdir, join as path_join, relpath
from subprocess import run
from sys import executable
from typing import Iterator


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  work_dir = env.setdefault('UTEST_WORK_DIR', getcwd())
  # Test scripts run from the build dir; the work dir must remain importable.
  env['PYTHONPATH'] = path_join(work_dir, env['PYTHONPATH']) if env.get('PYTHONPATH') else work_dir

  utest_cwd = '_build/_utest'
  makedirs(utest_cwd, exist_ok=True)
  ok = True
  for path in walk_test_files(args.paths):
    print(path)
    exe_path = relpath(path, utest_cwd)
    c = run([executable, exe_path], cwd=utest_cwd, env=env).returncode
    if c != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def walk_test_files(paths:list[str]) -> Iterator[str]:
  'Yield the ".ut.py" files in `paths` in sorted order, descending into directories and skipping hidden names.'
  for path in paths:
    if not isdir(path):
      if not path.endswith('.ut.py'): raise ValueError(f'not a utest file: {path!r}')
      yield path
      continue
    for dir_path, dir_names, file_names in walk(path):
      dir_names[:] = sorted(n for n in dir_names if not n.startswith('.'))
      for name in sorted(file_names):
        if name.endswith('.ut.py') and not name.startswith('.'):
          yield path_join(dir_path, name)


if __name__ == '__main__': main()
