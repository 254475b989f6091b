from setuptools import setup, Extension, find_packages
from Cython.Build import cythonize

extensions = [Extension("permbits.cycore.*", ["permbits/cycore/*.pyx"])]
extensions = cythonize(extensions, compiler_directives={"language_level": 3, "profile": False, "boundscheck": False, "nonecheck": False, "cdivision": True})

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="permbits",
    version="0.1.0",
    description="A dead simple, fast permission flag system on a single integer word, in Python and Cython",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests"]),
    package_data={"permbits.cycore": ["*.pyx"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.6',
    install_requires=["Cython"],
    extras_require={"test": ["pytest"]},
    ext_modules = extensions
)
