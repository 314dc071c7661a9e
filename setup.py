# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='strides',
  version='0.0.1',
  description='Strides provides lazy, stateful numeric ranges for Python 3.',
  license='CC0-1.0',
  python_requires='>=3.11',
  packages=['strides', 'utest'],
)
