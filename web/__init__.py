"""
Ledger Service (FastAPI)
"""
