"""
The api module holds the http client of the storage account and the types that
its responses are decoded into.
"""
