"""
Casino USM lunch reservation backend.
"""
