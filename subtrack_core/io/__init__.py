# subtrack_core/io/__init__.py
