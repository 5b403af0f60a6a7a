import setuptools

try:
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = "Async client for Vultr load balancers and forwarding rules"

setuptools.setup(
    name="vultr-lb",
    version="0.1.0",
    description="Async client for Vultr load balancers and forwarding rules",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src", include=["vultr_lb", "vultr_lb.*"]),
    install_requires=[
        "aiohttp",
        "pydantic>=2",
        "python-dotenv",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
)
