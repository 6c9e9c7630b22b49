"""
# Function and iterator tools shared by the packages.
"""
