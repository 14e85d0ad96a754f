"""
Core layer

Domain model, balance engine, configuration, logging and shared
utilities. No web or HTTP-client dependencies.
"""
