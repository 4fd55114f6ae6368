"""
Packaging script for PyPI.
"""
import setuptools
from pathlib import Path

try:
	from boozetools.macroparse.runtime import make_tables
except ImportError:
	pass
else:
	make_tables(Path(__file__).parent / "jet" / "Jet.md")

setuptools.setup(
	name='jet-lang',
	version='0.1.0',
	packages=['jet', "jet.adapters", "jet.tree_walker", ],
	package_data={
		'jet': ["Jet.md", "Jet.automaton"],
	},
	entry_points={
		'console_scripts': ["jet = jet.cmdline:main"],
	},
	license='MIT',
	description='An interpreter for Jet, a tiny language of numbers, lazy ranges, map and reduce',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.10",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Topic :: Software Development :: Compilers",
		"Environment :: Console",
    ],
	python_requires='>=3.10',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
