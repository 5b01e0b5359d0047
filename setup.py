from setuptools import setup, find_packages

setup(
    name="marketplace-dashboard",
    version="0.1.0",
    packages=find_packages(include=["marketplace_dashboard", "marketplace_dashboard.*"]),
    python_requires=">=3.9",
    install_requires=[
        "web3>=7.0.0",
        "eth-utils>=6.0.0",
        "aiohttp>=3.9.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
)
