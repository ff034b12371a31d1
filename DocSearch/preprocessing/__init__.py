"""
Preprocessing module for text processing in the search server.
Includes tokenization, lowercase conversion, stop word filtering and the
document records built from processed text.
"""
