"""
Restaurant catalogue.

Responsibilities:
- Load the starred-restaurant dataset into memory.
- Filter it by city / country / cuisine into planner candidates.
- Annotate candidates with the user's wishlist and visit markers.
"""
