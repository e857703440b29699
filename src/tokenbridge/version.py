from importlib.metadata import PackageNotFoundError, version

try:
    version = version("TokenBridge")
except PackageNotFoundError:
    version = "0.0.0"
