"""
Adapters — thin Google API wrappers, one module per API.

Each function takes the identity to impersonate first and raises ReaderError.
"""
