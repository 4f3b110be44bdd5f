"""
Shared infrastructure used by the data sources.

- http.py - ``requests.Session`` factory (default timeout, no retries)
"""
