"""
Storage backends behind the `MarketStore` interface.
"""
