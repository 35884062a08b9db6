import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="geompoint",
    version="0.1",
    description="Generic three-dimensional points with Euclidean distance, over any coordinate representation",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["geompoint", "geompoint.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.10',
    install_requires=[
        "attrs",
        "expression",
        "numpy",
    ],
    extras_require={
        "test": ["hypothesis", "pytest"],
    },
)
