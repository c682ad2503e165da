[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ygl"
version = "0.1.0"
description = "3D math, scene graph, materials and OBJ/MD5 mesh loaders in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "graphics", "scene-graph", "mesh", "obj", "md5", "camera", "quaternion"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ygl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
