"""
API route package

Router modules:
- health: health check
- expenses: expense list/create/delete
"""
