"""
The operations behind each utility. Nothing in here prints or exits.
"""
