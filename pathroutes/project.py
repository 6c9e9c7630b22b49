#: Project name.
name = 'pathroutes'
abstract = 'lexical and filesystem paths with configurable relative resolution'
icon = '🚏'

#: Version tuple: (major, minor, patch)
version_info = (0, 1, 0)

#: The version string.
version = '.'.join(map(str, version_info))
