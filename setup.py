"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='typemodel',
	version='0.1.0',
	packages=['typemodel', ],
	license='MIT',
	description='The type-expression model of a documentation generator: clone, render, and serialize type syntax.',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Documentation",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
