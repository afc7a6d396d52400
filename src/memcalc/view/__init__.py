"""
The VIEW layer contains the Qt widgets. Widgets only render what the
controller emits and forward user input back to it.
"""
