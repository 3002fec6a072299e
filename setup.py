#!/usr/bin/env python

from setuptools import setup

setup(name="cueprobe",
	version="0.1.0",
	description="Lazy validating cue sheet parser",
	python_requires=">=3.7",
	packages=["cueprobe", "cueprobe.core", "cueprobe.discid", "cueprobe.probe"],
	install_requires=["faust-cchardet"],
	extras_require={
		"test": ["pytest"],
	},
	entry_points={
		"console_scripts": ["cueparse = cueprobe.cli:run"],
	}
)
