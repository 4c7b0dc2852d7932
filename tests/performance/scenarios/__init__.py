"""
Locust scenario user classes.

Each module in this package defines one Locust ``HttpUser`` subclass
that models a specific traffic pattern against the commerce API:

- :mod:`.shopping`: new users register, browse and buy (weight 40)
- :mod:`.purchase`: seeded users log in and check out (weight 35)
- :mod:`.browse`: anonymous catalog search and browse (weight 20)
- :mod:`.analytics`: operators polling the analytics endpoint (weight 5)

All concrete scenarios inherit from the abstract base classes in
:mod:`.base`.
"""
