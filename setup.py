import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pngchunks",
    version="0.0.1",
    author="Gianluca Pacchiella",
    author_email="gp@ktln2.org",
    description="Hide messages into the chunks of PNG images",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/gipi/pngchunks",
    packages=setuptools.find_packages(exclude=['tests']),
    scripts=['scripts/pngmessage.py'],
    install_requires=[
        'bitstring',
    ],
    extras_require={
        'tests': [
            'pytest',
            'pillow',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v2 (GPLv2)",
        "Operating System :: OS Independent",
    ],
)
