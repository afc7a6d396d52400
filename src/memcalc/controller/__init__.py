"""
The CONTROLLER layer owns the calculator state and applies user commands to it.
"""
