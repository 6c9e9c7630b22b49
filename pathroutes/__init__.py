"""
# Path manipulation and filesystem access with configurable relative path resolution.

# [ Packages ]
# /&.route/
	# Lexical paths: flavors, the path algebra, glob patterns, and `file:` URIs.
# /&.system/
	# Filesystem bound paths and the resolution policies of relative paths.
# /&.context/
	# Shared function and iterator tools.
"""
from .route.core import PurePath, PurePosixPath, PureWindowsPath
from .route.core import InvalidComponent, AnchorMismatch, NotASubpath
from .system.filesystem import UnsupportedCapability
from .system.files import Path, PosixPath, WindowsPath
from .project import version as __version__

__all__ = [
	'PurePath',
	'PurePosixPath',
	'PureWindowsPath',
	'Path',
	'PosixPath',
	'WindowsPath',
	'InvalidComponent',
	'AnchorMismatch',
	'NotASubpath',
	'UnsupportedCapability',
]
