"""
Parser contract and combinator implementations over plain callables.
"""
