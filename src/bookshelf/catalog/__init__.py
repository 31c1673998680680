"""
Catalog query resolution: joins, pagination, argument parsing and errors
"""
