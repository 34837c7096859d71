"""
Service layer abstraction.

Services hold the operations for a domain so that API handlers stay
thin and the storage behind them can be swapped out.
"""
