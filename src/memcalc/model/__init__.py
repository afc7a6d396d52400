"""
The MODEL layer contains the calculator state and the pure number helpers.
It has NO knowledge of the GUI (Qt).
"""
