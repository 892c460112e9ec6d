import setuptools

setuptools.setup(
	name='place-tools',
	version='0.1.0',
	packages=[
		'placetools',
		'placetools.support',
	],
	description='Builtin macro markers for token sequences: concatenate, slice, reverse, re-case, and more',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Pre-processors",
		"Development Status :: 3 - Alpha",
    ],
)
