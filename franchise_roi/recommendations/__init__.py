"""
Franchise recommendation engine.

Responsibilities:
- Load the fixed franchise catalog once and keep it read-only.
- Parse human-readable investment / budget ranges into numeric intervals.
- Match catalog entries against a budget bucket and an industry filter.
- Rank matches by ROI and truncate to a top-N list.
"""
