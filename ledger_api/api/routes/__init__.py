"""
API route package

- health: liveness check
- accounts: account CRUD
- transactions: transaction CRUD and balance
"""
