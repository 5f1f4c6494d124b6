[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vtlpub"
version = "0.1.0"
description = "Prepare marked-up text, audio and media from one source file for several content platforms"
requires-python = ">=3.10"
dependencies = []
keywords = ["publication", "markdown", "telegram", "content", "media", "markup"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content :: News/Diary",
    "Topic :: Text Processing :: Markup",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vtlpub"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
