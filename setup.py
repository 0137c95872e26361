from setuptools import setup, find_packages

setup(
    name="mindmap-layout",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pandas",
        "shapely",
        "matplotlib",
        "seaborn",
        "networkx>=3.3",
        "pydantic",
        "fastapi",
        "uvicorn"
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx"
        ]
    }
)
