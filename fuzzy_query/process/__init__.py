# Path: fuzzy_query/process/__init__.py
"""
Process Layer

Pure expression building; nothing in this layer executes SQL.
"""
