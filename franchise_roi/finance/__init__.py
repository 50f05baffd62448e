"""
Loan derivation layer.

Responsibilities:
- Bound the loan parameters the report sliders can produce.
- Derive EMI, total interest and total payment for an amortizing loan.
"""
