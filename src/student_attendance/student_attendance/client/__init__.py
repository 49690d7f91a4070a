"""Consumer side of the API: what the browser frontend does, in Python.

``api`` talks HTTP, ``cache`` holds the fetched collections and refetches
after mutations, ``filters`` derives the searchable/sorted views and stats.
"""
