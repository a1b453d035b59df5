from setuptools import setup, find_packages

setup(
    name="seam-rpc",
    version="0.1.0",
    description="Seam RPC - transport-agnostic JSON-RPC 2.0 over stdio and HTTP",
    author="Seam RPC Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.8.0",
        "opentelemetry-api>=1.14.0",
        "opentelemetry-sdk>=1.14.0",
        "opentelemetry-exporter-otlp>=1.14.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-benchmark",
            "pytest-cov",
            "black",
            "isort",
            "pylint",
        ],
    },
    entry_points={
        "console_scripts": [
            "seam-rpc=seam_rpc.cli:main",
        ],
    },
    python_requires=">=3.9",
)
