"""
Setup script for the car-counter package with optional Cython compilation.

The core round lifecycle modules (car_counter._core) are compiled as
extensions when Cython is available; everything else ships as Python
source.
"""

from setuptools import setup, find_packages, Extension
import glob
import os

# Check if Cython is available
try:
    from Cython.Build import cythonize
    USE_CYTHON = True
except ImportError:
    USE_CYTHON = False
    print("Cython not found. Building without compilation (source only).")

# Internal modules to compile with Cython
CYTHON_MODULES = [
    path for path in sorted(glob.glob("src/car_counter/_core/*.py"))
    if not path.endswith("__init__.py")
]


def get_extensions():
    """Build Extension objects for Cython compilation."""
    if not USE_CYTHON:
        return []

    extensions = []
    for module_path in CYTHON_MODULES:
        # Convert path to module name: src/car_counter/_core/foo.py -> car_counter._core.foo
        module_name = module_path.replace("src/", "").replace("/", ".").replace(".py", "")
        extensions.append(
            Extension(
                name=module_name,
                sources=[module_path],
            )
        )
    return extensions


def get_ext_modules():
    """Get extension modules, cythonized if Cython is available."""
    extensions = get_extensions()
    if not extensions:
        return []

    return cythonize(
        extensions,
        compiler_directives={
            "language_level": "3",
            "boundscheck": False,
            "wraparound": False,
            "annotation_typing": False,
        },
        nthreads=os.cpu_count() or 1,
    )


setup(
    name="car-counter",
    version="1.0.0",
    description="Car Counter - a timed counting mini-game for the terminal",
    author="Car Counter Developers",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    ext_modules=get_ext_modules(),
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
        "dev": [
            "cython>=3.0",
            "build",
            "wheel",
            "pytest>=7.4",
        ],
    },
    package_data={
        "car_counter._store": ["schema.sql"],
        "car_counter": ["*.so", "*.pyd"],
    },
    entry_points={
        "console_scripts": [
            "car-counter=car_counter.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Topic :: Games/Entertainment :: Puzzle Games",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Cython",
    ],
)
