"""
Query parsing for free-text queries with plus and minus words.
"""
