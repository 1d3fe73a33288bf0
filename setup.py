from pathlib import Path

from setuptools import find_packages, setup


def get_long_description() -> str:
    return Path("README.md").read_text(encoding="utf8")


setup(
    name="yangparse",
    description="A forgiving tokenizer and parser for YANG-like statement documents.",
    use_scm_version={"fallback_version": "0.0.0"},
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    license="LGPL-3.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={"tests": ["pytest", "hypothesis>=6.80"]},
    entry_points={
        "console_scripts": [
            "yangparse=_yangparse.cli:main",
            "yangparse-lex=_yangparse.cli:lex_main",
        ]
    },
    platforms="any",
    classifiers=[
        "Development Status :: 1 - Planning",
        "License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.8",
    setup_requires=["setuptools_scm"],
    include_package_data=True,
)
