"""
Report data assembly.

Responsibilities:
- Build the ranked table and summary figures embedded in the exported report.
- Attach the loan summary when the user has set loan parameters.
- Accept "email me the report" requests (delivery is stubbed).
"""
