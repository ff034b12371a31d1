"""
TF-IDF search module for ranking documents by relevance to queries.
Relevance is the sum over matched query words of TF * IDF.
"""
