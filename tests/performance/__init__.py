"""
Performance testing package (Locust-based).

Contains Locust user classes, a phased load shape, helper utilities and
a CI threshold checker that together provide load and performance
regression testing for the commerce API (port 3001).

The dashboard service is **not** exercised; it is the operator-facing
surface that reports on these runs, not a load target.

Key Concepts Demonstrated:
- Weighted user classes matching the dashboard's scenario mix
- Seeded-account logins alongside fresh registrations
- Tagged scenarios so CI can run subsets via ``--tags``
- CSV-based threshold gates for automated pass/fail decisions
"""
