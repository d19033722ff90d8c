from .version import VersionInfo, get_version, read_version, version_file_path

# Bumped by hand together with pyproject.toml and version.json.
SDK_VERSION = "0.1.0"
__version__ = SDK_VERSION

__all__ = [
    "SDK_VERSION",
    "VersionInfo",
    "get_version",
    "read_version",
    "version_file_path",
]
