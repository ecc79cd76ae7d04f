#!/usr/bin/env python3

import botline
from setuptools import setup, find_packages


with open("requirements.txt") as f:
  requires = f.read().splitlines()


setup(name="botline",
      version=botline.__version__,
      description="Inbound message model for IRC bots",
      packages=find_packages(),
      include_package_data=True,
      zip_safe=False,
      test_suite="botline",
      install_requires=requires,
      entry_points="""\
      [console_scripts]
      botline = botline.bot:main
      """
      )
