from setuptools import setup, find_packages

setup(
    name="sudoku-backtracking-solver",
    version="1.0.0",
    description="Exhaustive backtracking solver enumerating every solution of a 9x9 Sudoku",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.24.0",
        "tqdm>=4.65.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "sudoku-solve=sudoku_solver.cli:main",
        ]
    },
)
