"""
The MODEL layer contains pure data structures and geometry helpers.
It has NO knowledge of the markup that is eventually written.
"""
