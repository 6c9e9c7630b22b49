"""
# Filesystem bound paths and relative path resolution policies.
"""
