"""
LocalCoinSwap skill: P2P offers, currency swaps and trades exposed as
MCP tools, with a confirmation gate in front of real-money actions.
"""
