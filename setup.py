from setuptools import setup, find_packages

setup(
    name="cmdhelp",
    version="0.3.0b0",
    description="Context-sensitive help rendering for command-line applications — wrapped text, aligned flag and command tables",
    author="Dustin",
    author_email="6962246+djdarcy@users.noreply.github.com",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[],
    extras_require={
        "test": ["pytest", "pytest-cov"],
    },
    entry_points={
        "console_scripts": [
            "cmdhelp=cmdhelp.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
)
