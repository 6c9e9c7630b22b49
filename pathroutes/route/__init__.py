"""
# Lexical path types and the syntax dialects that govern them.
"""
