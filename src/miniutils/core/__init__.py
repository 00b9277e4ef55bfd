"""
Configuration, constants and errors shared by the utilities.
"""
