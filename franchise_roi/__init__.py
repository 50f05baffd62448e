"""
Franchise ROI recommendation service.

Matches a prospective franchisee's budget and industry against a fixed
catalog, ranks the matches by ROI, and derives loan repayment figures for
the exported report.
"""
