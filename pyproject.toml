[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractol"
version = "0.1.0"
description = "Fractal explorer core: complex-plane helpers, a headless window context with images and a render queue, XPM42 textures and small text and memory utilities."
requires-python = ">=3.10"
dependencies = []
keywords = ["fractal", "mandelbrot", "julia", "complex numbers", "pixels", "xpm42", "render queue"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fractol"]

[tool.pytest.ini_options]
addopts = "-ra"
