#!/usr/bin/env python
# -*- coding: utf-8 -*-

import codecs
import os

from setuptools import setup, find_packages

requirements = []

entry_points = {"console_scripts": ["cmdtree=cmdtree.__main__:main"]}

module_dir = os.path.dirname(__file__)

with codecs.open(os.path.join(module_dir, "README.rst"), encoding="utf8") as f:
    long_description = f.read()

setup(name="cmdtree",
      version="0.1.0",
      description="cmdtree parses shell command lines into abstract syntax trees",
      long_description=long_description,
      license="GPLv3",
      packages=find_packages(exclude=["tests"]),
      install_requires=requirements,
      python_requires=">=3.5",
      entry_points=entry_points,
      classifiers=[
          "Development Status :: 4 - Beta",
          "Intended Audience :: Developers",
          "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
          "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Operating System :: OS Independent",
          "Topic :: Software Development :: Interpreters",
          "Topic :: Utilities"],
      keywords="shell parser ast pipeline tokenizer")
