from setuptools import setup, find_packages

setup(
    name="exactsolve",
    version="1.0",
    description="Exact Gauss-Jordan elimination with fractions and a replayable step history",
    long_description=("Solves square linear equation systems exactly with rational arithmetic. Every elimination step "
                      "is kept as an immutable snapshot, the pivot order is chosen from the zero pattern of the matrix."),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["exactsolve", "exactsolve.*"]),
    install_requires=["numpy", "scipy", "sympy", "matplotlib"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    entry_points={"console_scripts": ["exactsolve = exactsolve.cli:main"]},
    classifiers=[
        "Intended Audience :: Education", "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3.9", "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear equations", "gauss-jordan", "fractions", "exact arithmetic"],
    zip_safe=False,
)
