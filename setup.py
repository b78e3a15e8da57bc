from setuptools import setup, find_packages

setup(
    name="chartcanvas",
    version="1.0.0",
    description="Axis scales, histogram bins and curve paths from tab-separated chart data",
    packages=find_packages(exclude=['tests', 'tests.*', 'scripts', 'cache', '.pytest_cache']),
    install_requires=[
        "httpx>=0.27.0",
        "numpy>=1.24.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",
        "fastapi>=0.109.0",
        "uvicorn>=0.27.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-mock>=3.10.0",
            "respx>=0.21.0",
        ],
    },
    python_requires=">=3.11",
)
