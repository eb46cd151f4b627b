"""
Multi-day dining itinerary planner.

Responsibilities:
- Order the candidate pool so wishlisted and higher-starred restaurants seed the route.
- Build a greedy nearest-neighbour route over the city using haversine distance.
- Pack the route into lunch / dinner slots per day under the stars-per-day budget.
- Attach calendar dates and return the day-by-day itinerary.
"""
