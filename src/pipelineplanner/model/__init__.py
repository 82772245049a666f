"""
The MODEL layer contains pure data structures and graph algorithms.
It has NO knowledge of the GUI (Qt) or of rendering.
It deals with Sites, Links and the disjoint-set forest.
"""
