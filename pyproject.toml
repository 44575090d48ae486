[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vmdos"
version = "1.0.1"
description = "A simulated text-mode hobby operating system: VGA screen, tiny VFS, keyboard, timer and shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "vga", "text-mode", "shell", "hobby-os", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vmdos = "vmdos.kernel:main"

[tool.hatch.build.targets.wheel]
packages = ["vmdos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
