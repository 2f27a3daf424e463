#!/usr/bin/env python

from os.path import abspath, dirname, join

from setuptools import setup

with open(join(dirname(abspath(__file__)), 'simplelex', 'version.py')) as version_file:
    exec(compile(version_file.read(), "version.py", 'exec'))

setup(name='simplelex',
      version=version,  # noqa: F821
      author='The simplelex developers',
      description="Lexicon and morphology for natural language generation",
      packages=['simplelex', 'simplelex.morphology', 'simplelex.english',
                'simplelex.scripts'],
      # 3.6 and up, but not Python 4
      python_requires='~=3.6',
      install_requires=[
          "attrs>=18.2.0",
          "vistautils>=0.12.0",
          "immutablecollections>=0.8.0",
          "more-itertools>=7.2.0",
          "PyYAML>=5.1",
      ],
      extras_require={
          "test": ["pytest>=5.0"],
      },
      scripts=[
      ],
      classifiers=[
          "Programming Language :: Python :: 3",
          "License :: OSI Approved :: MIT License",
          "Operating System :: OS Independent",
      ]
      )
