from setuptools import setup, find_packages

setup(
    name="gridstore",
    version="0.1.0",
    packages=find_packages(exclude=["tests"]),
    package_data={"gridstore": ["configs/*.yaml"]},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "grid_tool=gridstore.tools.grid_tool:main",
        ]
    },
)
