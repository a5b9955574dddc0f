from setuptools import setup, find_packages

setup(
    name="formatted_text",
    version="1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="Render text containing Discord-style inline markup into HTML.",
    install_requires=["peggie>=0.2.0"],
    extras_require={"test": ["pytest", "mypy"]},
    entry_points={
        "console_scripts": [
            "formatted-text=formatted_text.scripts.formatted_text:main",
            "formatted-text-lint=formatted_text.scripts.formatted_text_lint:main",
        ],
    },
)
