[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algodemos"
version = "0.1.0"
description = "Small, traceable demonstrations of classic graph, selection and coding algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "dfs", "bfs", "dijkstra", "quickselect", "huffman", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algodemos-influence = "algodemos.influence:main"
algodemos-quickselect = "algodemos.quickselect:main"
algodemos-citynav = "algodemos.citynav:main"
algodemos-dijkstra = "algodemos.dijkstra:main"
algodemos-huffman = "algodemos.huffman:main"

[tool.hatch.build.targets.wheel]
packages = ["algodemos"]

[tool.pytest.ini_options]
addopts = "-ra"
