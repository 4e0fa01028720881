"""
Core building blocks for the phrase store.
Provides the database layer, index policies, logging setup and errors.
"""
