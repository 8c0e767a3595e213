"""Services Layer — note and preference workflows plus the dashboard read path.

Invariants:
    - Every write workflow takes the resolved user id explicitly
    - Workflows commit or roll back themselves; callers never see a half-written state

Design Decisions:
    - One handler file per workflow for locality
"""
