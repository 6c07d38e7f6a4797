import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="affixgen",
    version="0.1.0",
    description="Affix-based word forms generation and bounded edit distance for spellcheckers",
    long_description=long_description,
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",

        "License :: OSI Approved :: MIT License",

        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",

        "Operating System :: OS Independent",

        "Topic :: Text Processing :: Linguistic"
    ],
    python_requires='>=3.8',
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["affixgen=affixgen.__main__:main"],
    },
    keywords=["hunspell", "affix", "spelling", "spellcheck", "levenshtein"]
)
