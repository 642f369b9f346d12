from setuptools import setup, find_packages

setup(
    name="hilite",
    version="0.1.0",
    description="Grammar-driven ANSI highlighting for terminal text",
    packages=find_packages(include=["hilite", "hilite.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["hilite=hilite.__main__:main"],
    },
    python_requires=">=3.11",
)
