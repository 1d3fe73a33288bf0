from importlib.metadata import PackageNotFoundError, version

try:
    version = version("yangparse")
except PackageNotFoundError:
    version = "0.0.0"
