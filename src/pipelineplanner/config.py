"""
Configuration & Global Constants
================================
This module serves as the central registry for the planner's tunable constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (e.g., "30 px apart") from being
   scattered throughout the model and the controllers.
2. Overrides: Structures that depend on these values accept them as
   constructor arguments and fall back to the defaults defined here.

Exports:
    MIN_SEPARATION (float): Minimum allowed distance between two sites.
    PICK_RADIUS (float): Maximum distance at which a click selects a site.
    PICK_Y_OFFSET (float): Vertical offset of a site's connection point
        (the base of the drawn building) used when picking.
"""

# Two sites closer than this are rejected (distance == MIN_SEPARATION is accepted)
MIN_SEPARATION: float = 30.0

# Hit-testing for the host application
PICK_RADIUS: float = 40.0
PICK_Y_OFFSET: float = 16.0
