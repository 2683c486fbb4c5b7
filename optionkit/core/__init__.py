"""
Configuration, logging, error types and the option schema model.
"""
