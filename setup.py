import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="logobaker",
    version="0.1.0",
    description="Watermark and social preview image generator with multi-format export.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=setuptools.find_packages(include=["logobaker", "logobaker.*"]),
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        "numpy>=1.21",
        "opencv-python>=4.5",
        "pydantic>=2.0",
        "typer>=0.9",
        "loguru",
        "Pillow>=10.1",
    ],
    entry_points={
        "console_scripts": [
            "logobaker=logobaker.cli:main",
        ],
    },
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "black>=23.1",
            "flake8>=6.0",
        ],
    },
)
