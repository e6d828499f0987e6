#!/usr/bin/env python3

from setuptools import setup, find_packages

deps = [
]

tests_require = [
	'pytest',
	'pytype',
	'parameterized',
]

setup(
	name="nutconf",
	version="0.2",
	description="Command-line editor for Network UPS Tools configuration files.",
	license="LGPL3+",
	python_requires=">=3.8",
	install_requires=deps,
	tests_require=tests_require,
	extras_require={'test': tests_require},
	packages=find_packages(include=['nutconf', 'nutconf.*']),

	entry_points={
		'console_scripts': [
			'nutconf = nutconf.tool.main:main',
		]
	},

	classifiers=[

	],
)
