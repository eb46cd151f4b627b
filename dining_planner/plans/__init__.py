"""
Stored travel plans.

Responsibilities:
- Validate trip requests (dates, stars-per-day budget, optional start point).
- Keep generated itineraries per user with a public share token.
- Serialise plans as day -> ordered meals -> restaurant.
"""
